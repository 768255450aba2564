"""routes/account.py – GET /api/account"""
from fastapi import APIRouter
from ..deps import get_account
from ..models import AccountResponse

router = APIRouter(prefix="/api", tags=["Account"])


@router.get("/account", response_model=AccountResponse)
async def account():
    return get_account().summary()
