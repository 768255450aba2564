"""routes/stores.py – browse stores, store page, selection totals.

  GET  /api/stores                   → stores grouped + sorted (distance | price | rating)
  GET  /api/stores/{slug}            → one store with its items
  POST /api/stores/{slug}/selection  → totals for the checked items
"""
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..deps import get_store_handler
from ..models import OrderSummary, SelectionRequest, SortKey, StoreGroup

router = APIRouter(prefix="/api/stores", tags=["Stores"])


@router.get("", response_model=list[StoreGroup])
async def browse(
    sort: SortKey = Query(default="distance", description="distance | price | rating"),
    lat:  Optional[float] = Query(default=None, ge=-90, le=90, description="User latitude"),
    lng:  Optional[float] = Query(default=None, ge=-180, le=180, description="User longitude"),
):
    """
    Catalog items grouped by **store**. Without `lat`/`lng` every store is 0.5 km away.
    """
    try:
        return await get_store_handler().browse(sort, lat, lng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{slug}", response_model=StoreGroup)
async def store(
    slug: str,
    lat:  Optional[float] = Query(default=None, ge=-90, le=90),
    lng:  Optional[float] = Query(default=None, ge=-180, le=180),
):
    try:
        return await get_store_handler().store(slug, lat, lng)
    except ValueError as e:
        status = 404 if "not found" in str(e) else 400
        raise HTTPException(status_code=status, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{slug}/selection", response_model=OrderSummary)
async def selection(slug: str, req: SelectionRequest):
    """Discounted total, original total and savings of the checked items."""
    try:
        return await get_store_handler().selection(slug, req.indices)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
