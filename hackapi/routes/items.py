"""routes/items.py – GET /api/items, POST /api/upload-excel"""
from typing import Optional
from fastapi import APIRouter, File, HTTPException, UploadFile
from ..deps import get_items, get_upload_handler
from ..models import ItemsResponse, UploadResponse

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/items", response_model=ItemsResponse)
async def list_items():
    try:
        return ItemsResponse(items=await get_items().list_items())
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/upload-excel", response_model=UploadResponse)
async def upload_excel(file: Optional[UploadFile] = File(default=None)):
    """Append the rows of an .xlsx vendor sheet to the catalog."""
    if file is None:
        raise HTTPException(status_code=400, detail="Missing file")
    try:
        content = await file.read()
        return await get_upload_handler().handle(file.filename or "", content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
