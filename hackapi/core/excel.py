"""
core/excel.py – ExcelImporter class.
Turns the first sheet of a vendor .xlsx upload into Item rows.
"""
import io
import logging
from typing import Any, Optional

from openpyxl import load_workbook
from pydantic import ValidationError

from ..models import Item

logger = logging.getLogger(__name__)

COL_STORE = "Store name"
COL_ADDRESS = "Store address"
COL_FOOD = "Food name"
COL_QTY = "Qty available"
COL_ORIG = "Original price (Php)"
COL_DISC = "Discounted price (Php)"
COL_SURPRISE = "Surprise Me"


class ExcelImporter:
    """Header row + data rows → list[Item]. Rows without store or food name are dropped."""

    def parse(self, content: bytes) -> list[Item]:
        rows = self.read_rows(content)
        items: list[Item] = []
        for n, row in enumerate(rows, start=2):
            item = self._row_to_item(row, n)
            if item is not None:
                items.append(item)
        logger.info("Parsed %d/%d Excel rows into items", len(items), len(rows))
        return items

    def read_rows(self, content: bytes) -> list[dict[str, Any]]:
        """First worksheet as a list of {header: value} dicts."""
        try:
            wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        except Exception as e:
            raise ValueError(f"Could not read Excel file: {type(e).__name__}") from e
        try:
            ws = wb.worksheets[0]
            values = list(ws.iter_rows(values_only=True))
        finally:
            wb.close()
        if not values:
            return []
        headers = [str(h).strip() if h is not None else "" for h in values[0]]
        return [
            {h: v for h, v in zip(headers, row) if h}
            for row in values[1:]
            if any(v is not None and str(v).strip() for v in row)
        ]

    # ── Private ────────────────────────────────────────────────────────────────

    def _row_to_item(self, row: dict[str, Any], line: int) -> Optional[Item]:
        store = self._text(row.get(COL_STORE))
        food = self._text(row.get(COL_FOOD))
        if not store or not food:
            return None
        try:
            return Item(
                store_name=store,
                store_address_url=self._text(row.get(COL_ADDRESS)),
                food_name=food,
                qty=int(self._number(row.get(COL_QTY))),
                original_price_php=self._number(row.get(COL_ORIG)),
                discounted_price_php=self._number(row.get(COL_DISC)),
                surprise_group=self._text(row.get(COL_SURPRISE)) or None,
            )
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning("Excel row %d skipped: %s", line, e)
            return None

    @staticmethod
    def _text(value: Any) -> str:
        return "" if value is None else str(value).strip()

    @staticmethod
    def _number(value: Any) -> float:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return float(value)
