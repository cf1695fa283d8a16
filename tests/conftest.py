"""
Pytest configuration for the glossary browser.

Provides fixtures for:
- Settings isolation (the cached settings are rebuilt for every test)
- Sample term records
- Generated on-disk data directories
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator, List

import pytest

from glossary.config import Settings, get_settings
from glossary.domain.models import Domain, TermRecord
from scripts.generate_data import _write_domain_files


@pytest.fixture(autouse=True)
def fresh_settings_cache() -> Generator[None, None, None]:
    """
    Drop the cached Settings around each test so env overrides take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        data_dir=str(tmp_path / "data"),
        preferences_path=str(tmp_path / "prefs.json"),
        debounce_ms=20,
        fetch_attempts=1,
        log_level="DEBUG",
    )


@pytest.fixture
def sample_terms() -> List[TermRecord]:
    """
    A small mixed-domain collection, in catalog order.
    """
    return [
        TermRecord(
            formal_term="Disco duro",
            colloquial_term="disco",
            definition="dispositivo de almacenamiento",
            usage_example="Se me llenó el disco.",
            domain=Domain.COMPUTING,
        ),
        TermRecord(
            formal_term="Informática",
            colloquial_term="compu",
            definition="Ciencia del tratamiento automático de la información.",
            usage_example="Estudio informática en el ITSC.",
            domain=Domain.COMPUTING,
        ),
        TermRecord(
            formal_term="Fiebre",
            colloquial_term="calentura",
            definition="Aumento de la temperatura corporal.",
            usage_example="Amaneció con calentura.",
            domain=Domain.HEALTH,
        ),
        TermRecord(
            formal_term="Varilla corrugada",
            colloquial_term="cabilla",
            usage_example="Faltan diez cabillas.",
            domain=Domain.CONSTRUCTION,
        ),
    ]


@pytest.fixture
def seeded_data_dir(tmp_path: Path) -> Path:
    """
    Write sample files (5 valid records each) for every domain.

    Returns the directory holding the `<domain>.json` files.
    """
    data_dir = tmp_path / "data"
    _write_domain_files(data_dir, rows=5, seed=42)
    return data_dir
