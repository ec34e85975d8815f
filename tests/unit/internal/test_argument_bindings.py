from __future__ import annotations

import ast

from fixwire import (
    EmptyResolver,
    MappingResolver,
    PairResolver,
    compose,
    expression_source,
    fixture,
    fixtures_resolver,
    parse_expression,
    resolve_argument,
    resolve_function_arguments,
)


def _function(source: str) -> ast.FunctionDef | ast.AsyncFunctionDef:
    function = ast.parse(source).body[0]
    assert isinstance(function, (ast.FunctionDef, ast.AsyncFunctionDef))
    return function


def test_resolve_argument_uses_bound_expression() -> None:
    resolver = PairResolver("db", parse_expression("fake_db()"))

    assert expression_source(resolve_argument(resolver, "db")) == "fake_db()"


def test_resolve_argument_falls_back_to_default_call() -> None:
    expression = resolve_argument(EmptyResolver(), "db")

    assert expression_source(expression) == "db.default()"


def test_resolve_argument_custom_fallback_attribute() -> None:
    expression = resolve_argument(EmptyResolver(), "db", fallback_attribute="get")

    assert expression_source(expression) == "db.get()"


def test_resolve_argument_returns_copy_of_borrowed_expression() -> None:
    stored = parse_expression("fake_db()")
    resolver = MappingResolver({"db": stored})

    expression = resolve_argument(resolver, "db")

    assert expression is not stored
    assert expression_source(expression) == "fake_db()"


def test_resolve_function_arguments_in_declaration_order() -> None:
    function = _function("def test_it(user, db, widget, /, extra): pass")
    resolver = compose(
        MappingResolver({"user": parse_expression("'alice'")}),
        fixtures_resolver([fixture("db", ["url"]), fixture("widget", ["a", "b"])]),
    )

    bindings = resolve_function_arguments(function, resolver)

    assert [(name, expression_source(expression)) for name, expression in bindings] == [
        ("user", "'alice'"),
        ("db", "db.partial_1(url)"),
        ("widget", "widget.partial_2(a, b)"),
        ("extra", "extra.default()"),
    ]


def test_resolve_function_arguments_handles_async_and_empty_signatures() -> None:
    function = _function("async def test_it(): pass")

    assert resolve_function_arguments(function, EmptyResolver()) == []


def test_resolve_function_arguments_ignores_keyword_only_parameters() -> None:
    function = _function("def test_it(db, *, flag=True): pass")

    bindings = resolve_function_arguments(function, EmptyResolver())

    assert [name for name, _ in bindings] == ["db"]
