from __future__ import annotations

import ast

from fixwire._internal.expressions import call_expression, identifier_of
from fixwire._internal.resolvers.protocol import ResolverProtocol
from fixwire.defaults import DEFAULT_FALLBACK_ATTRIBUTE


def resolve_argument(
    resolver: ResolverProtocol,
    name: str,
    *,
    fallback_attribute: str = DEFAULT_FALLBACK_ATTRIBUTE,
) -> ast.expr:
    """Return the expression to bind ``name`` to in generated code.

    Falls back to the fixture's own default constructor, ``name.default()``,
    when no resolver in the chain binds the name. The result is always owned
    by the caller.

    Args:
        resolver: Resolver, usually a composed chain of overrides and fixtures.
        name: Argument name to resolve.
        fallback_attribute: Attribute called on ``name`` when it is unbound.

    """
    resolution = resolver.resolve(name)
    if resolution is not None:
        return resolution.into_owned()
    return call_expression(name, fallback_attribute, ())


def resolve_function_arguments(
    function: ast.FunctionDef | ast.AsyncFunctionDef,
    resolver: ResolverProtocol,
    *,
    fallback_attribute: str = DEFAULT_FALLBACK_ATTRIBUTE,
) -> list[tuple[str, ast.expr]]:
    """Resolve every positional parameter of ``function`` in declaration order.

    Args:
        function: Parsed function whose parameters receive fixture values.
        resolver: Resolver used for every parameter.
        fallback_attribute: Attribute called on unbound names.

    """
    arguments = (*function.args.posonlyargs, *function.args.args)
    names = [identifier_of(argument) for argument in arguments]
    return [
        (name, resolve_argument(resolver, name, fallback_attribute=fallback_attribute))
        for name in names
    ]
