"""
core/catalog.py – ItemStore class.
Owns data/items.json: read the whole file, append rows, write the whole file back.

Blocking file I/O is wrapped in run_in_executor so the event loop is not blocked.
"""
import asyncio
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from ..models import Item

logger = logging.getLogger(__name__)

DEMO_STORE = "I Want Cake Store"
DEMO_STORE_URL = "https://maps.app.goo.gl/fsoyMr7umRkh3G3a7"

# (food name, qty, original price, discounted price)
DEMO_ITEMS: list[tuple[str, int, float, float]] = [
    ("Mini Signature Black Forest", 5,  925,  450),
    ("Carrot Cheesecake",           4,  1150, 700),
    ("Salted Caramel Crunch",       7,  800,  300),
    ("Mini Strawberry Shortcake",   15, 955,  500),
    ("Classic Ube Cake",            20, 1255, 800),
    ("Red Velvet",                  10, 1400, 900),
    ("Mango Bravo",                 17, 500,  200),
    ("Triple Chocolate Roll",       14, 400,  250),
    ("Mango Peach Tiramisu",        15, 1280, 900),
    ("Mango Magnifico",             9,  1230, 700),
]


class ItemStore:
    """Flat JSON item catalog. Append-only; no update/delete."""

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._data_dir / "items.json"

    # ── Public API ─────────────────────────────────────────────────────────────

    async def list_items(self) -> list[Item]:
        """All items; demo catalog when items.json is missing or unreadable."""
        return await asyncio.get_event_loop().run_in_executor(None, self._read)

    async def append_items(self, items: list[Item]) -> int:
        """Append items to items.json. Returns number appended."""
        return await asyncio.get_event_loop().run_in_executor(None, self._append, items)

    def ensure_data_dir(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def demo_items() -> list[Item]:
        return [
            Item(
                store_name=DEMO_STORE,
                store_address_url=DEMO_STORE_URL,
                food_name=name,
                qty=qty,
                original_price_php=orig,
                discounted_price_php=disc,
                surprise_group=None,
            )
            for name, qty, orig, disc in DEMO_ITEMS
        ]

    # ── Private ────────────────────────────────────────────────────────────────

    def _read(self) -> list[Item]:
        raw = self._load_raw()
        if raw is None:
            return self.demo_items()
        return self._to_items(raw)

    def _append(self, items: list[Item]) -> int:
        with self._lock:
            existing = self._load_raw() or []
            merged = [*existing, *(i.model_dump(by_alias=True) for i in items)]
            self.ensure_data_dir()
            self._write_atomic(json.dumps(merged, indent=2, ensure_ascii=False))
        logger.info("Appended %d items to %s (total %d)", len(items), self.path, len(merged))
        return len(items)

    def _write_atomic(self, text: str) -> None:
        """Temp file in the same dir, then os.replace: readers see the old or the new file, never half."""
        fd, tmp = tempfile.mkstemp(dir=self._data_dir, prefix=".items-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def _load_raw(self) -> list[dict] | None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return None
        if not isinstance(data, list):
            logger.warning("%s is not a JSON list, ignoring", self.path)
            return None
        return data

    @staticmethod
    def _to_items(raw: list[dict]) -> list[Item]:
        items: list[Item] = []
        for row in raw:
            try:
                items.append(Item.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping bad item row %r: %s", row, e.error_count())
        return items
