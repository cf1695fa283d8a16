"""
Schema validation for raw term records.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from glossary.domain.models import source_field

REQUIRED_FIELDS = ("formal_term", "colloquial_term", "usage_example")
OPTIONAL_FIELDS = ("definition",)


def validate_term_schema(record: Any) -> bool:
    """
    Check a raw record against the term schema.

    Required fields must be non-blank strings; optional fields, when present,
    must be strings (empty allowed).
    """
    if not isinstance(record, Mapping):
        return False

    for name in REQUIRED_FIELDS:
        present, value = source_field(record, name)
        if not present or not isinstance(value, str) or not value.strip():
            return False

    for name in OPTIONAL_FIELDS:
        present, value = source_field(record, name)
        if present and not isinstance(value, str):
            return False

    return True


__all__ = ["OPTIONAL_FIELDS", "REQUIRED_FIELDS", "validate_term_schema"]
