from __future__ import annotations

import pytest
from pydantic import ValidationError

from glossary.domain.models import (
    DOMAIN_DISPLAY_NAMES,
    DOMAINS,
    Domain,
    TermRecord,
    display_name,
)

EXPECTED_DOMAIN_COUNT = 7


def test_domain_enumeration_order_is_fixed():
    assert len(DOMAINS) == EXPECTED_DOMAIN_COUNT
    assert [d.value for d in DOMAINS] == [
        "informatica",
        "salud",
        "artes",
        "hosteleria",
        "construccion",
        "industrial",
        "electromecanica",
    ]


def test_domain_parse_is_case_insensitive():
    assert Domain.parse("SALUD") is Domain.HEALTH
    assert Domain.parse(" Informatica ") is Domain.COMPUTING
    assert Domain.parse(Domain.ARTS) is Domain.ARTS
    assert Domain.parse("cocina") is None
    assert Domain.parse(None) is None  # type: ignore[arg-type]


def test_display_names_cover_every_domain_and_are_read_only():
    assert set(DOMAIN_DISPLAY_NAMES) == set(DOMAINS)
    assert display_name("hosteleria") == "Turismo"
    assert display_name(Domain.COMPUTING) == "Informática"
    assert display_name("desconocida") == "desconocida"
    with pytest.raises(TypeError):
        DOMAIN_DISPLAY_NAMES[Domain.ARTS] = "Otra"  # type: ignore[index]


def test_from_source_reads_dataset_keys():
    term = TermRecord.from_source(
        {
            "termino_formal": "Fiebre",
            "dominicanismo": "calentura",
            "ejemplo_uso": "Amaneció con calentura.",
        },
        Domain.HEALTH,
    )

    assert term.formal_term == "Fiebre"
    assert term.colloquial_term == "calentura"
    assert term.definition is None
    assert term.domain is Domain.HEALTH


def test_from_source_prefers_canonical_keys_over_aliases():
    term = TermRecord.from_source(
        {
            "formal_term": "Canonical",
            "termino_formal": "Alias",
            "colloquial_term": "c",
            "usage_example": "u",
            "definicion": "",
        },
        Domain.ARTS,
    )

    assert term.formal_term == "Canonical"
    assert term.definition == ""


def test_term_record_is_frozen(sample_terms):
    with pytest.raises(ValidationError):
        sample_terms[0].formal_term = "changed"
