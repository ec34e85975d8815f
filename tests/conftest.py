"""Shared pytest fixtures for fixwire tests."""

import ast

import pytest

from fixwire import Fixture, FixtureExpressionBuilder, MappingResolver, fixture, parse_expression


@pytest.fixture()
def builder() -> FixtureExpressionBuilder:
    """Builder with the default ``partial_`` prefix."""
    return FixtureExpressionBuilder()


@pytest.fixture()
def fixtures() -> list[Fixture]:
    """A small declaration set covering arity zero, one and two."""
    return [
        fixture("pippo"),
        fixture("db", ["url"]),
        fixture("widget", ["a", "b"]),
    ]


@pytest.fixture()
def bar_call() -> ast.expr:
    """Expression ``bar()``."""
    return parse_expression("bar()")


@pytest.fixture()
def overrides() -> MappingResolver:
    """Override resolver binding ``db`` and ``user`` to literal expressions."""
    return MappingResolver(
        {
            "db": parse_expression("fake_db()"),
            "user": parse_expression("'alice'"),
        },
    )
