"""
Filesystem term source: reads `<data_dir>/<domain>.json`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from glossary.config import get_settings
from glossary.domain.errors import NotFoundError, PayloadDecodeError, TransportError
from glossary.domain.models import Domain
from glossary.sources.abstract import AbstractTermSource


class FileTermSource(AbstractTermSource):
    """
    Read domain collections from JSON files in a local directory.

    File reads run in a worker thread so concurrent domain loads do not block
    the event loop.
    """

    name: str = "file"
    description: str = "JSON files named <domain>.json in a local directory."

    def __init__(self, data_dir: Optional[Path | str] = None) -> None:
        self.data_dir = Path(data_dir if data_dir is not None else get_settings().data_dir)

    def path_for(self, domain: Domain) -> Path:
        return self.data_dir / self.resource_name(domain)

    async def fetch(self, domain: Domain) -> Any:
        path = self.path_for(domain)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFoundError(domain, str(path)) from exc
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(
                domain, f"Data for domain '{domain.value}' is not valid UTF-8: {exc}"
            ) from exc
        except OSError as exc:
            raise TransportError(domain, f"{type(exc).__name__}: {exc}") from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise PayloadDecodeError(
                domain, f"Data for domain '{domain.value}' is not valid JSON: {exc}"
            ) from exc


__all__ = ["FileTermSource"]
