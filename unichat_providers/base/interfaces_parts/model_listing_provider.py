"""ModelListingProvider Protocol (single-class module).

Contract for adapters whose ``capabilities.model_listing`` is ``True``.
"""

from __future__ import annotations

from typing import List, Protocol


class ModelListingProvider(Protocol):
    """Interface to obtain the model identifiers a provider offers."""

    def models(self) -> List[str]:
        """Return known model identifiers; empty when the backend lists none."""
        ...
