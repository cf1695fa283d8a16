import json
from pathlib import Path
from time import sleep

from glossary import config
from glossary.domain.models import DOMAINS, Domain
from glossary.orchestrator import available_sources
from glossary.utils import profiler
from scripts import generate_data


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.source_kind == "file"
    assert settings.data_dir == "data"
    assert settings.debounce_ms == 300
    assert settings.fetch_attempts > 0
    assert settings.fetch_timeout_seconds > 0


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("GLOSSARY_DEBOUNCE_MS", "150")
    monkeypatch.setenv("GLOSSARY_SOURCE", "http")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.debounce_ms == 150
    assert settings.source_kind == "http"


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    if stats.rss_after_bytes is not None:
        assert stats.rss_after_bytes > 0
    assert stats.as_dict()["label"] == "sleep"


def test_available_sources_contains_known_entries():
    names = available_sources()
    assert names == ["file", "http"]


def test_generate_data_writes_one_file_per_domain(tmp_path: Path):
    written = generate_data._write_domain_files(tmp_path, rows=3, seed=123)

    assert set(written) == set(DOMAINS)
    for domain in DOMAINS:
        records = json.loads((tmp_path / f"{domain.value}.json").read_text(encoding="utf-8"))
        assert len(records) == 3
        assert {"termino_formal", "dominicanismo", "ejemplo_uso"} <= set(records[0])


def test_generate_data_skips_requested_domains(tmp_path: Path):
    written = generate_data._write_domain_files(
        tmp_path, rows=2, seed=1, skip=[Domain.HEALTH]
    )

    assert Domain.HEALTH not in written
    assert not (tmp_path / "salud.json").exists()
