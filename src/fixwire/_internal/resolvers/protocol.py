from __future__ import annotations

import ast
import copy
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Resolution:
    """Carry the expression bound to a resolved name.

    ``borrowed`` tells the caller who owns ``expression``: a borrowed value is a
    read-only view into storage held by a resolver (or by the caller that built
    it), an owned value was built for this lookup and belongs to the caller.
    """

    expression: ast.expr
    """Expression bound to the resolved name."""
    borrowed: bool = True
    """True when ``expression`` lives in storage the caller does not own."""

    def into_owned(self) -> ast.expr:
        """Return an expression the caller may mutate or splice into a new tree."""
        if self.borrowed:
            return copy.deepcopy(self.expression)
        return self.expression


@runtime_checkable
class ResolverProtocol(Protocol):
    """Protocol for a name-to-expression resolver."""

    def resolve(self, name: str) -> Resolution | None:
        """Return the expression bound to ``name`` or ``None`` when nothing binds it.

        Args:
            name: Identifier to look up. Matching is exact and case-sensitive.

        """
