"""
Domain models for the glossary browser.

Defines the closed set of academic domains, their display names, and the
term record schema shared by the loader, search index and reporter.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field


class Domain(str, Enum):
    """Academic domains, in the order the catalog is assembled."""

    COMPUTING = "informatica"
    HEALTH = "salud"
    ARTS = "artes"
    HOSPITALITY = "hosteleria"
    CONSTRUCTION = "construccion"
    INDUSTRIAL = "industrial"
    ELECTROMECHANICAL = "electromecanica"

    @classmethod
    def parse(cls, value: Union[str, "Domain"]) -> Optional["Domain"]:
        """Resolve a domain id case-insensitively; None when unknown."""
        if isinstance(value, Domain):
            return value
        if not isinstance(value, str):
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value == wanted:
                return member
        return None


DOMAINS: Tuple[Domain, ...] = tuple(Domain)

DOMAIN_DISPLAY_NAMES: Mapping[Domain, str] = MappingProxyType(
    {
        Domain.COMPUTING: "Informática",
        Domain.HEALTH: "Salud",
        Domain.ARTS: "Artes",
        Domain.HOSPITALITY: "Turismo",
        Domain.CONSTRUCTION: "Construcción",
        Domain.INDUSTRIAL: "Industrial",
        Domain.ELECTROMECHANICAL: "Electromecánica",
    }
)


def display_name(domain: Union[str, Domain]) -> str:
    """Human-friendly name for a domain id; unknown ids are returned as given."""
    member = Domain.parse(domain)
    if member is None:
        return str(domain)
    return DOMAIN_DISPLAY_NAMES[member]


# Canonical field name -> key used by the original dataset files.
SOURCE_FIELD_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "formal_term": "termino_formal",
        "colloquial_term": "dominicanismo",
        "definition": "definicion",
        "usage_example": "ejemplo_uso",
    }
)


def source_field(record: Mapping[str, Any], name: str) -> Tuple[bool, Any]:
    """
    Look up a canonical field in a raw source record.

    Returns ``(present, value)``; the canonical key takes precedence over its
    dataset alias.
    """
    if name in record:
        return True, record[name]
    alias = SOURCE_FIELD_ALIASES.get(name)
    if alias is not None and alias in record:
        return True, record[alias]
    return False, None


class TermRecord(BaseModel):
    """
    One glossary entry: formal term, regional equivalent, definition, example.
    """

    formal_term: str = Field(..., description="Formal/technical term.")
    colloquial_term: str = Field(..., description="Regional colloquial equivalent.")
    usage_example: str = Field(..., description="Example sentence using the term.")
    definition: Optional[str] = Field(None, description="Optional definition text.")
    domain: Domain = Field(..., description="Domain the term was loaded from.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @classmethod
    def from_source(cls, record: Mapping[str, Any], domain: Domain) -> "TermRecord":
        """Build a tagged record from a raw record that passed schema validation."""
        values = {}
        for name in ("formal_term", "colloquial_term", "usage_example", "definition"):
            present, value = source_field(record, name)
            if present:
                values[name] = value
        return cls(domain=domain, **values)


TermCollection = Tuple[TermRecord, ...]


__all__ = [
    "DOMAINS",
    "DOMAIN_DISPLAY_NAMES",
    "Domain",
    "SOURCE_FIELD_ALIASES",
    "TermCollection",
    "TermRecord",
    "display_name",
    "source_field",
]
