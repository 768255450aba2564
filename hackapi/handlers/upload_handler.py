"""
handlers/upload_handler.py – UploadHandler class.
Excel upload → parsed rows → appended to items.json.
"""
import logging

from ..core.catalog import ItemStore
from ..core.excel import ExcelImporter
from ..models import UploadResponse

logger = logging.getLogger(__name__)


class UploadHandler:
    def __init__(self, importer: ExcelImporter, items: ItemStore) -> None:
        self._importer = importer
        self._items = items

    async def handle(self, filename: str, content: bytes) -> UploadResponse:
        if not content:
            raise ValueError("Missing file")
        rows = self._importer.parse(content)
        count = await self._items.append_items(rows) if rows else 0
        logger.info("[Upload] %s → %d items", filename or "<unnamed>", count)
        return UploadResponse(count=count)
