"""routes/auth.py – POST /api/auth/request-otp, POST /api/auth/verify-otp"""
from fastapi import APIRouter, HTTPException
from ..deps import get_otp
from ..models import OkResponse, RequestOtpRequest, RequestOtpResponse, VerifyOtpRequest

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/request-otp", response_model=RequestOtpResponse)
async def request_otp(req: RequestOtpRequest):
    try:
        return RequestOtpResponse(otp_hint=get_otp().request(req.full_name, req.mobile))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/verify-otp", response_model=OkResponse)
async def verify_otp(req: VerifyOtpRequest):
    try:
        get_otp().verify(req.mobile, req.otp)
        return OkResponse()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
