"""routes/checkout.py – POST /api/checkout"""
from fastapi import APIRouter, HTTPException
from ..deps import get_checkout
from ..models import CheckoutRequest, CheckoutResponse

router = APIRouter(prefix="/api", tags=["Checkout"])


@router.post("/checkout", response_model=CheckoutResponse)
async def checkout(req: CheckoutRequest):
    """Demo order: no payment is taken. Returns ETA and the delivery app link."""
    try:
        return get_checkout().place(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
