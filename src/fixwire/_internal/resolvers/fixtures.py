from __future__ import annotations

import ast
import logging
from collections.abc import Iterable

from fixwire._internal.expressions import call_expression
from fixwire._internal.fixtures import Fixture
from fixwire._internal.resolvers.primitives import MappingResolver
from fixwire.defaults import DEFAULT_PARTIAL_PREFIX

logger = logging.getLogger(__name__)


class FixtureExpressionBuilder:
    """Synthesize default call expressions for fixture declarations.

    A fixture ``N`` declared with positional parameters ``p_1..p_k`` resolves
    to ``N.partial_k(p_1, ..., p_k)``: the constructor is picked by arity and
    the arguments keep their declared order.
    """

    def __init__(self, *, partial_prefix: str = DEFAULT_PARTIAL_PREFIX) -> None:
        self._partial_prefix = partial_prefix

    @property
    def partial_prefix(self) -> str:
        return self._partial_prefix

    def partial_name(self, arity: int) -> str:
        """Return the name of the constructor taking ``arity`` positional arguments."""
        return f"{self._partial_prefix}{arity}"

    def build_expression(self, fixture: Fixture) -> ast.Call:
        """Build the default call expression for a single fixture.

        Args:
            fixture: Fixture declaration to synthesize the call for.

        """
        return call_expression(
            fixture.name,
            self.partial_name(fixture.arity),
            fixture.positional,
        )

    def build_resolver(self, fixtures: Iterable[Fixture]) -> MappingResolver:
        """Collect the default expressions of all fixtures into one resolver.

        Fixtures sharing a name follow mapping semantics: the last one wins.

        Args:
            fixtures: Fixture declarations for one code-generation pass.

        """
        bindings: dict[str, ast.expr] = {}
        fixture_count = 0
        for fixture in fixtures:
            fixture_count += 1
            if fixture.name in bindings:
                logger.debug("Fixture %r redeclared; the later declaration wins", fixture.name)
            bindings[fixture.name] = self.build_expression(fixture)

        logger.info(
            "Fixture resolver built: fixture_count=%d binding_count=%d partial_prefix=%r",
            fixture_count,
            len(bindings),
            self._partial_prefix,
        )
        return MappingResolver(bindings)


_DEFAULT_BUILDER = FixtureExpressionBuilder()


def build_fixture_expression(fixture: Fixture) -> ast.Call:
    """Build ``name.partial_<k>(p_1, ..., p_k)`` for ``fixture`` with the default prefix."""
    return _DEFAULT_BUILDER.build_expression(fixture)


def fixtures_resolver(fixtures: Iterable[Fixture]) -> MappingResolver:
    """Return a resolver binding every fixture name to its default call expression."""
    return _DEFAULT_BUILDER.build_resolver(fixtures)
