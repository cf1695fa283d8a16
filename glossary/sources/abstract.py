"""
Abstract term source interfaces for the glossary browser.

A term source fetches the raw payload of one domain (conceptually
`<domain>.json`). Concrete sources (filesystem, HTTP) implement the
TermSource protocol and translate their failures into the per-domain error
taxonomy so the loader can treat every source the same way.
"""

from __future__ import annotations

import abc
from typing import Any, Protocol, runtime_checkable

from glossary.domain.models import Domain


@runtime_checkable
class TermSource(Protocol):
    """
    Common interface all term sources must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of where terms come from.
    """

    name: str
    description: str

    async def fetch(self, domain: Domain) -> Any:
        """
        Fetch and parse the raw payload for one domain.

        Parameters
        ----------
        domain : Domain
            The domain whose collection is requested.

        Returns
        -------
        Any
            The decoded JSON payload; the loader checks its shape.

        Raises
        ------
        NotFoundError, SourceStatusError, TransportError, PayloadDecodeError
        """
        ...

    async def close(self) -> None:
        """Release any resources held by the source."""
        ...


class AbstractTermSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `fetch`.
    """

    name: str
    description: str

    @staticmethod
    def resource_name(domain: Domain) -> str:
        return f"{domain.value}.json"

    @abc.abstractmethod
    async def fetch(self, domain: Domain) -> Any:  # pragma: no cover - interface only
        """Fetch the raw payload for a domain."""
        raise NotImplementedError

    async def close(self) -> None:
        return None


__all__ = [
    "AbstractTermSource",
    "TermSource",
]
