class FixWireError(Exception):
    """Represent a base class for all fixwire-specific failures.

    Catch this type when you want to handle any fixwire error path without
    matching each concrete exception class individually.
    """


class FixWireExpressionSyntaxError(FixWireError, ValueError):
    """Signal that source text is not a single Python expression.

    Raised by ``parse_expression`` when the given text fails to parse in
    expression mode, for example statements (``x = 1``) or unbalanced brackets.

    Typical fix is passing the expression alone, without assignments or
    trailing statements.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot parse {source!r} as an expression: {reason}")


class FixWireInvalidResolverError(FixWireError, TypeError):
    """Signal an object that cannot act as a resolver.

    Raised by ``DynResolver`` and ``compose`` when a value is neither an object
    with a ``resolve(name)`` method nor a plain callable taking a name.

    Typical fix is wrapping the bindings in ``MappingResolver`` or passing a
    function ``(name) -> ast.expr | None``.
    """

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f"{type(target).__name__!s} is not a resolver: expected an object with "
            "a resolve(name) method or a callable taking a name",
        )
