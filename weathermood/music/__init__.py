"""Public façade for the weathermood.music package.

Exposes the fallback track retriever and the catalog capability protocol it
runs against.
"""

from .capability import CatalogCapability
from .fallback import NoResultsFound, build_strategy_chain, retrieve

__all__ = [
    "CatalogCapability",
    "NoResultsFound",
    "build_strategy_chain",
    "retrieve",
]
