DEFAULT_PARTIAL_PREFIX = "partial_"
"""Prefix of the arity-indexed constructor invoked by synthesized fixture calls."""

DEFAULT_FALLBACK_ATTRIBUTE = "default"
"""Attribute called on a fixture name when no resolver binds it."""
