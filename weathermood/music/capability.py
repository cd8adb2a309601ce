"""The catalog capability consumed by the fallback retriever.

Any object with these five methods can back the retrieval chain: the
Spotify-backed SpotifyCatalog in production, a recording fake in tests.
Each method may raise; the retriever treats a raised error like an empty
result.
"""

from typing import Protocol, Sequence

from weathermood.core import CollectionRef, Track


class CatalogCapability(Protocol):
    def search_by_keyword(self, term: str, limit: int) -> Sequence[Track]: ...

    def list_saved_items(self, limit: int) -> Sequence[Track]: ...

    def list_top_items(self, limit: int, time_range: str) -> Sequence[Track]: ...

    def list_featured_collections(self, limit: int) -> Sequence[CollectionRef]: ...

    def list_collection_items(
        self, collection_id: str, limit: int
    ) -> Sequence[Track]: ...
