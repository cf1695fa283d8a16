"""
Sample data generation script for the glossary browser.

Writes one `<domain>.json` file per academic domain using the dataset's
source keys (termino_formal, dominicanismo, definicion, ejemplo_uso).
Row generation is deterministic for a given seed, and invalid records can be
injected to exercise the loader's validation path.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from glossary.domain.models import DOMAINS, Domain

app = typer.Typer(help="Generate sample <domain>.json glossary files.")

# A handful of real entries per domain; the generator pads with variations.
SEED_TERMS: Dict[Domain, List[Dict[str, str]]] = {
    Domain.COMPUTING: [
        {
            "termino_formal": "Disco duro",
            "dominicanismo": "disco",
            "definicion": "Dispositivo de almacenamiento de datos no volátil.",
            "ejemplo_uso": "Se me llenó el disco y no puedo guardar la tarea.",
        },
        {
            "termino_formal": "Computadora portátil",
            "dominicanismo": "laptop",
            "definicion": "Ordenador personal ligero y transportable.",
            "ejemplo_uso": "Traje la laptop para la práctica de informática.",
        },
    ],
    Domain.HEALTH: [
        {
            "termino_formal": "Fiebre",
            "dominicanismo": "calentura",
            "definicion": "Aumento de la temperatura corporal por encima de lo normal.",
            "ejemplo_uso": "El niño amaneció con calentura.",
        },
    ],
    Domain.ARTS: [
        {
            "termino_formal": "Boceto",
            "dominicanismo": "rayón",
            "definicion": "Dibujo preliminar de una obra.",
            "ejemplo_uso": "Hice un rayón antes de pintar el mural.",
        },
    ],
    Domain.HOSPITALITY: [
        {
            "termino_formal": "Propina",
            "dominicanismo": "la fría",
            "definicion": "Gratificación voluntaria por un servicio.",
            "ejemplo_uso": "El cliente dejó algo para la fría.",
        },
    ],
    Domain.CONSTRUCTION: [
        {
            "termino_formal": "Varilla corrugada",
            "dominicanismo": "cabilla",
            "definicion": "Barra de acero usada como refuerzo del hormigón.",
            "ejemplo_uso": "Faltan diez cabillas para la columna.",
        },
    ],
    Domain.INDUSTRIAL: [
        {
            "termino_formal": "Montacargas",
            "dominicanismo": "grúa",
            "definicion": "Vehículo para levantar y mover cargas pesadas.",
            "ejemplo_uso": "Trae la grúa para bajar los paletes.",
        },
    ],
    Domain.ELECTROMECHANICAL: [
        {
            "termino_formal": "Cortocircuito",
            "dominicanismo": "chispazo",
            "definicion": "Conexión accidental de baja resistencia entre conductores.",
            "ejemplo_uso": "Hubo un chispazo en el panel y se fue la luz.",
        },
    ],
}

_INVALID_RECORDS: List[Any] = [
    {"termino_formal": "Sin ejemplo", "dominicanismo": "incompleto"},
    {"termino_formal": "   ", "dominicanismo": "vacío", "ejemplo_uso": "texto"},
    {"termino_formal": "Definición rara", "dominicanismo": "x", "ejemplo_uso": "y", "definicion": 3},
    "not-a-record",
]


def _generate_domain_records(
    domain: Domain, rows: int, rng: random.Random, invalid_ratio: float
) -> List[Any]:
    seeds = SEED_TERMS[domain]
    records: List[Any] = []
    for i in range(rows):
        if invalid_ratio > 0 and rng.random() < invalid_ratio:
            records.append(rng.choice(_INVALID_RECORDS))
            continue
        base = seeds[i % len(seeds)]
        if i < len(seeds):
            records.append(dict(base))
            continue
        variant = i // len(seeds)
        record = {
            "termino_formal": f"{base['termino_formal']} {variant}",
            "dominicanismo": base["dominicanismo"],
            "ejemplo_uso": base["ejemplo_uso"],
        }
        # Some entries ship without a definition, as in the curated files.
        if rng.random() > 0.2:
            record["definicion"] = base["definicion"]
        records.append(record)
    return records


def _write_domain_files(
    output_dir: Path,
    rows: int,
    seed: int,
    invalid_ratio: float = 0.0,
    skip: Optional[List[Domain]] = None,
) -> Dict[Domain, int]:
    """Write one JSON file per domain; returns the number of records written."""
    rng = random.Random(seed)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[Domain, int] = {}
    for domain in DOMAINS:
        if skip and domain in skip:
            continue
        records = _generate_domain_records(domain, rows, rng, invalid_ratio)
        path = output_dir / f"{domain.value}.json"
        with path.open("w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
        written[domain] = len(records)
    return written


@app.command()
def main(
    output: Path = typer.Option(
        Path("data"),
        "--output",
        "-o",
        help="Directory to write the <domain>.json files into.",
    ),
    rows: int = typer.Option(
        10,
        "--rows",
        "-r",
        help="Number of records per domain.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    invalid_ratio: float = typer.Option(
        0.0,
        "--invalid-ratio",
        help="Share of records (0-1) replaced by schema-invalid entries.",
    ),
    skip: List[str] = typer.Option(
        [],
        "--skip",
        help="Domain id to leave without a file (repeatable).",
    ),
) -> None:
    """
    Generate sample glossary files for every domain.
    """
    start = time.perf_counter()
    skipped = [member for member in (Domain.parse(s) for s in skip) if member is not None]
    written = _write_domain_files(output, rows=rows, seed=seed, invalid_ratio=invalid_ratio, skip=skipped)
    duration = time.perf_counter() - start
    typer.echo(
        f"Wrote {sum(written.values()):,} records across {len(written)} domains "
        f"to {output} in {duration:.2f}s (seed={seed})."
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
