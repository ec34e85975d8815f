from __future__ import annotations

import ast
from collections.abc import Iterable

from fixwire.exceptions import FixWireExpressionSyntaxError


def parse_expression(source: str) -> ast.expr:
    """Parse a single Python expression from source text.

    Args:
        source: Expression source, for example ``"bar()"`` or ``"a + 1"``.

    """
    try:
        tree = ast.parse(source.strip(), mode="eval")
    except SyntaxError as exc:
        raise FixWireExpressionSyntaxError(source, exc.msg) from exc
    return tree.body


def expression_source(expression: ast.expr) -> str:
    """Render an expression back to source text."""
    return ast.unparse(expression)


def expressions_equal(left: ast.expr, right: ast.expr) -> bool:
    """Compare two expressions structurally, ignoring source positions."""
    return ast.dump(left, include_attributes=False) == ast.dump(right, include_attributes=False)


def name_expression(name: str) -> ast.Name:
    return ast.Name(id=name, ctx=ast.Load())


def call_expression(target: str, attribute: str, arguments: Iterable[str]) -> ast.Call:
    """Build ``target.attribute(arg_1, ..., arg_k)`` with arguments in the given order."""
    call = ast.Call(
        func=ast.Attribute(value=name_expression(target), attr=attribute, ctx=ast.Load()),
        args=[name_expression(argument) for argument in arguments],
        keywords=[],
    )
    return ast.fix_missing_locations(call)


def identifier_of(node: str | ast.Name | ast.arg) -> str:
    """Return the identifier carried by a name, a function argument or a plain string."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.arg):
        return node.arg
    return node
