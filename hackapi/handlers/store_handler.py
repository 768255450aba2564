"""
handlers/store_handler.py – StoreHandler class.
Browse / store page / selection: ItemStore data run through StoreDirectory.
"""
from typing import Optional

from ..core.browse import Coord, StoreDirectory
from ..core.catalog import ItemStore
from ..models import OrderSummary, SortKey, StoreGroup


class StoreHandler:
    def __init__(self, items: ItemStore, directory: StoreDirectory) -> None:
        self._items = items
        self._directory = directory

    async def browse(
        self,
        sort_by: SortKey = "distance",
        lat: Optional[float] = None,
        lng: Optional[float] = None,
    ) -> list[StoreGroup]:
        items = await self._items.list_items()
        return self._directory.browse(items, sort_by, self._user(lat, lng))

    async def store(self, slug: str, lat: Optional[float] = None, lng: Optional[float] = None) -> StoreGroup:
        items = await self._items.list_items()
        return self._directory.find(items, slug, self._user(lat, lng))

    async def selection(self, slug: str, indices: list[int]) -> OrderSummary:
        store = await self.store(slug)
        return self._directory.select(store, indices)

    @staticmethod
    def _user(lat: Optional[float], lng: Optional[float]) -> Optional[Coord]:
        if lat is None and lng is None:
            return None
        if lat is None or lng is None:
            raise ValueError("lat and lng must be given together")
        return Coord(lat, lng)
