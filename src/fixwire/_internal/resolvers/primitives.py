from __future__ import annotations

import ast
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TypeAlias

from fixwire._internal.resolvers.protocol import Resolution, ResolverProtocol
from fixwire.exceptions import FixWireInvalidResolverError

ResolveFunction: TypeAlias = Callable[[str], ast.expr | None]
"""A plain function that builds the expression for a name, or returns ``None``."""


class EmptyResolver:
    """Resolver without bindings."""

    __slots__ = ()

    def resolve(self, name: str) -> Resolution | None:
        del name
        return None

    def __repr__(self) -> str:
        return "EmptyResolver()"


class MappingResolver:
    """Resolve names against a mapping of owned expressions.

    The bindings are copied into the resolver at construction, so later changes
    to the source mapping are not observed. Results borrow the stored
    expressions.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[str, ast.expr] | None = None) -> None:
        self._bindings: dict[str, ast.expr] = dict(bindings or {})

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, ast.expr]]) -> MappingResolver:
        """Build a resolver from ``(name, expression)`` pairs; later pairs overwrite earlier ones."""
        return cls(dict(pairs))

    def resolve(self, name: str) -> Resolution | None:
        expression = self._bindings.get(name)
        if expression is None:
            return None
        return Resolution(expression, borrowed=True)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"MappingResolver(names={list(self._bindings)!r})"


class BorrowedMappingResolver:
    """Resolve names against a mapping owned by the caller.

    Unlike ``MappingResolver`` the mapping is not copied: the resolver is a
    live view and must not outlive the mapping it borrows.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[str, ast.expr]) -> None:
        self._bindings = bindings

    def resolve(self, name: str) -> Resolution | None:
        expression = self._bindings.get(name)
        if expression is None:
            return None
        return Resolution(expression, borrowed=True)

    def __repr__(self) -> str:
        return f"BorrowedMappingResolver(names={list(self._bindings)!r})"


class PairResolver:
    """Resolve exactly one name to one expression."""

    __slots__ = ("expression", "name")

    def __init__(self, name: str, expression: ast.expr) -> None:
        self.name = name
        self.expression = expression

    def resolve(self, name: str) -> Resolution | None:
        if name != self.name:
            return None
        return Resolution(self.expression, borrowed=True)

    def __repr__(self) -> str:
        return f"PairResolver(name={self.name!r}, expression={ast.unparse(self.expression)!r})"


class ResolverRef:
    """Forward lookups to a resolver held by reference.

    Lets code that only has access to a resolver (not its construction)
    hand it to composition without rebuilding or copying its storage.
    """

    __slots__ = ("_target",)

    def __init__(self, target: ResolverProtocol) -> None:
        self._target = target

    @property
    def target(self) -> ResolverProtocol:
        return self._target

    def resolve(self, name: str) -> Resolution | None:
        return self._target.resolve(name)

    def __repr__(self) -> str:
        return f"ResolverRef({self._target!r})"


class DynResolver:
    """Own an indirection over any resolver-shaped value.

    Accepts either an object following ``ResolverProtocol`` or a plain
    ``(name) -> ast.expr | None`` function. Expressions returned by a function
    are treated as freshly built and handed to the caller as owned.
    """

    __slots__ = ("_resolve",)

    def __init__(self, target: ResolverProtocol | ResolveFunction) -> None:
        # Resolver classes expose ``resolve`` too; only instances can answer lookups.
        if isinstance(target, type):
            raise FixWireInvalidResolverError(target)
        if isinstance(target, ResolverProtocol):
            self._resolve: Callable[[str], Resolution | None] = target.resolve
        elif callable(target):
            function = target

            def _resolve_function(name: str) -> Resolution | None:
                expression = function(name)
                if expression is None:
                    return None
                return Resolution(expression, borrowed=False)

            self._resolve = _resolve_function
        else:
            raise FixWireInvalidResolverError(target)

    def resolve(self, name: str) -> Resolution | None:
        return self._resolve(name)
