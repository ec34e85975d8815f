from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Fixture:
    """Describe a fixture declaration as produced by the upstream parser.

    ``positional`` keeps the declared parameter order verbatim; it is never
    reordered or deduplicated. Any iterable is accepted and stored as a tuple;
    a bare string is one parameter name, not a sequence of characters.
    """

    name: str
    """Identifier the fixture is bound to."""
    positional: tuple[str, ...] = field(default=())
    """Positional parameter names in declaration order."""

    def __post_init__(self) -> None:
        positional = self.positional
        if isinstance(positional, str):
            positional = (positional,)
        object.__setattr__(self, "positional", tuple(positional))

    @property
    def arity(self) -> int:
        """Return the number of positional parameters."""
        return len(self.positional)


def fixture(name: str, positional: Iterable[str] = ()) -> Fixture:
    """Build a ``Fixture`` from a name and its positional parameter names."""
    return Fixture(name=name, positional=positional)  # type: ignore[arg-type]
