from __future__ import annotations

from typing import TYPE_CHECKING

from fixwire._internal.resolvers.primitives import DynResolver, ResolveFunction
from fixwire._internal.resolvers.protocol import Resolution, ResolverProtocol
from fixwire.exceptions import FixWireInvalidResolverError

if TYPE_CHECKING:
    from typing_extensions import Self


class ComposedResolver:
    """Combine two resolvers with strict left-to-right precedence.

    ``second`` is consulted only when ``first`` has no binding. Nest to the
    right to express longer chains: ``ComposedResolver(a, ComposedResolver(b, c))``
    checks ``a``, then ``b``, then ``c``.
    """

    __slots__ = ("first", "second")

    def __init__(self, first: ResolverProtocol, second: ResolverProtocol) -> None:
        self.first = first
        self.second = second

    def resolve(self, name: str) -> Resolution | None:
        resolution = self.first.resolve(name)
        if resolution is not None:
            return resolution
        return self.second.resolve(name)

    def __repr__(self) -> str:
        return f"ComposedResolver({self.first!r}, {self.second!r})"


class ChainResolver:
    """Consult an ordered list of resolvers; the first one with a binding wins.

    Equivalent to right-nested ``ComposedResolver`` instances without the
    nesting. The leftmost resolver has the highest priority.
    """

    __slots__ = ("_resolvers",)

    def __init__(self, *resolvers: ResolverProtocol) -> None:
        self._resolvers = resolvers

    @property
    def resolvers(self) -> tuple[ResolverProtocol, ...]:
        """Return the resolvers in consultation order."""
        return self._resolvers

    def then(self, resolver: ResolverProtocol) -> Self:
        """Return a new chain with ``resolver`` appended at the lowest priority."""
        return type(self)(*self._resolvers, resolver)

    def resolve(self, name: str) -> Resolution | None:
        for resolver in self._resolvers:
            resolution = resolver.resolve(name)
            if resolution is not None:
                return resolution
        return None

    def __len__(self) -> int:
        return len(self._resolvers)

    def __repr__(self) -> str:
        inner = ", ".join(repr(resolver) for resolver in self._resolvers)
        return f"ChainResolver({inner})"


def compose(*resolvers: ResolverProtocol | ResolveFunction) -> ChainResolver:
    """Chain resolvers so that earlier arguments take precedence over later ones.

    Nested chains are flattened in place and plain ``(name) -> ast.expr | None``
    functions are wrapped in ``DynResolver``, so the consultation order is the
    argument order.

    Args:
        *resolvers: Resolvers or resolve functions, highest priority first.

    Examples:
        .. code-block:: python

            overrides = MappingResolver({"db": parse_expression("fake_db()")})
            resolver = compose(overrides, fixtures_resolver(fixtures))
            resolver.resolve("db")  # the override, not the fixture default

    """
    flattened: list[ResolverProtocol] = []
    for resolver in resolvers:
        if isinstance(resolver, type):
            raise FixWireInvalidResolverError(resolver)
        if isinstance(resolver, ChainResolver):
            flattened.extend(resolver.resolvers)
        elif isinstance(resolver, ResolverProtocol):
            flattened.append(resolver)
        else:
            flattened.append(DynResolver(resolver))
    return ChainResolver(*flattened)
