"""
core/browse.py – StoreDirectory class.
Groups catalog items by store, computes distance to the user, sorts, and totals selections.
"""
import math
from dataclasses import dataclass
from typing import Optional

from ..models import Item, OrderSummary, SortKey, StoreGroup

EARTH_RADIUS_KM = 6371
DEFAULT_RATING = 4.4
DEFAULT_DISTANCE_KM = 0.5


@dataclass(frozen=True)
class Coord:
    lat: float
    lng: float


# Approx. Gaisano Mall Davao; stores without their own entry share it.
DEMO_STORE_COORD = Coord(7.0907, 125.6125)


def haversine_km(a: Coord, b: Coord) -> float:
    """Great-circle distance in km."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    s = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.lat)) * math.cos(math.radians(b.lat)) * math.sin(d_lng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(s))


def slugify(store_name: str) -> str:
    return store_name.lower().replace(" ", "-")


def summarize(items: list[Item]) -> OrderSummary:
    """Discounted total, original total and savings (never negative)."""
    total = sum(i.discounted_price_php for i in items)
    orig = sum(i.original_price_php for i in items)
    return OrderSummary(items=items, total_php=total, original_php=orig, saved_php=max(orig - total, 0))


class StoreDirectory:
    """Store listing built from the flat item list."""

    def __init__(self, store_coords: Optional[dict[str, Coord]] = None) -> None:
        self._coords = store_coords or {}

    # ── Public API ─────────────────────────────────────────────────────────────

    def group(self, items: list[Item], user: Optional[Coord] = None) -> list[StoreGroup]:
        """One StoreGroup per store name, in first-seen order."""
        by_store: dict[str, list[Item]] = {}
        for it in items:
            by_store.setdefault(it.store_name, []).append(it)
        return [self._make_group(name, group, user) for name, group in by_store.items()]

    def browse(
        self,
        items: list[Item],
        sort_by: SortKey = "distance",
        user: Optional[Coord] = None,
    ) -> list[StoreGroup]:
        stores = self.group(items, user)
        if sort_by == "price":
            return sorted(stores, key=lambda s: s.min_price_php)
        if sort_by == "rating":
            return sorted(stores, key=lambda s: s.rating, reverse=True)
        return sorted(stores, key=lambda s: s.distance_km)

    def find(self, items: list[Item], slug: str, user: Optional[Coord] = None) -> StoreGroup:
        """Store whose lower-cased name equals the slug with '-' → ' '."""
        name = slug.replace("-", " ").lower()
        group = [i for i in items if i.store_name.lower() == name]
        if not group:
            raise ValueError(f"Store not found: {slug}")
        return self._make_group(group[0].store_name, group, user)

    @staticmethod
    def select(store: StoreGroup, indices: list[int]) -> OrderSummary:
        """Selected items by index; out-of-range indexes are ignored."""
        picked = sorted({i for i in indices if 0 <= i < len(store.items)})
        return summarize([store.items[i] for i in picked])

    def distance_to(self, store_name: str, user: Optional[Coord]) -> float:
        if user is None:
            return DEFAULT_DISTANCE_KM
        return haversine_km(user, self._coords.get(store_name, DEMO_STORE_COORD))

    # ── Private ────────────────────────────────────────────────────────────────

    def _make_group(self, name: str, items: list[Item], user: Optional[Coord]) -> StoreGroup:
        return StoreGroup(
            store_name=name,
            store_address_url=items[0].store_address_url,
            slug=slugify(name),
            rating=DEFAULT_RATING,
            distance_km=round(self.distance_to(name, user), 3),
            min_price_php=min(i.discounted_price_php for i in items),
            items=items,
        )
