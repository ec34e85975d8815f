from __future__ import annotations

import inspect

import fixwire
import fixwire.exceptions as fixwire_exceptions


def test_all_names_are_importable() -> None:
    for name in fixwire.__all__:
        assert hasattr(fixwire, name), name


def test_all_is_sorted_without_duplicates() -> None:
    assert len(set(fixwire.__all__)) == len(fixwire.__all__)
    assert fixwire.__all__ == sorted(fixwire.__all__)


def test_exceptions_share_base_class() -> None:
    errors = [
        value
        for _, value in inspect.getmembers(fixwire_exceptions, inspect.isclass)
        if value.__module__ == fixwire_exceptions.__name__
    ]

    assert errors
    for error in errors:
        assert issubclass(error, fixwire.FixWireError)
        assert error.__doc__


def test_public_classes_have_docstrings() -> None:
    undocumented = [
        name
        for name in fixwire.__all__
        if inspect.isclass(getattr(fixwire, name)) and not getattr(fixwire, name).__doc__
    ]

    assert undocumented == []
