from fixwire._internal.bindings import resolve_argument, resolve_function_arguments
from fixwire._internal.expressions import (
    expression_source,
    expressions_equal,
    identifier_of,
    parse_expression,
)
from fixwire._internal.fixtures import Fixture, fixture
from fixwire._internal.resolvers.composition import ChainResolver, ComposedResolver, compose
from fixwire._internal.resolvers.fixtures import (
    FixtureExpressionBuilder,
    build_fixture_expression,
    fixtures_resolver,
)
from fixwire._internal.resolvers.primitives import (
    BorrowedMappingResolver,
    DynResolver,
    EmptyResolver,
    MappingResolver,
    PairResolver,
    ResolverRef,
)
from fixwire._internal.resolvers.protocol import Resolution, ResolverProtocol
from fixwire.exceptions import (
    FixWireError,
    FixWireExpressionSyntaxError,
    FixWireInvalidResolverError,
)

__all__ = [
    "BorrowedMappingResolver",
    "ChainResolver",
    "ComposedResolver",
    "DynResolver",
    "EmptyResolver",
    "FixWireError",
    "FixWireExpressionSyntaxError",
    "FixWireInvalidResolverError",
    "Fixture",
    "FixtureExpressionBuilder",
    "MappingResolver",
    "PairResolver",
    "Resolution",
    "ResolverProtocol",
    "ResolverRef",
    "build_fixture_expression",
    "compose",
    "expression_source",
    "expressions_equal",
    "fixture",
    "fixtures_resolver",
    "identifier_of",
    "parse_expression",
    "resolve_argument",
    "resolve_function_arguments",
]
