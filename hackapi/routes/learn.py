"""routes/learn.py – Bisayan learning games.

  GET  /api/learn/categories
  POST /api/learn/flashcards   → 5 cards
  POST /api/learn/memory       → 6 pairs, shuffled
  POST /api/learn/quiz         → 5 multiple-choice questions
  POST /api/learn/buddy        → study buddy reply
  POST /api/learn/translate    → word in 4 Philippine dialects
"""
from fastapi import APIRouter, HTTPException

from ..core.fallback import categories
from ..deps import get_learn_handler
from ..models import (
    BuddyRequest,
    BuddyResponse,
    FlashcardsResponse,
    GameRequest,
    MemoryResponse,
    QuizResponse,
    TranslateRequest,
    TranslateResponse,
)

router = APIRouter(prefix="/api/learn", tags=["Learn"])


@router.get("/categories")
async def list_categories():
    return {"categories": categories()}


@router.post("/flashcards", response_model=FlashcardsResponse)
async def flashcards(req: GameRequest):
    try:
        return await get_learn_handler().flashcards(req.category, req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/memory", response_model=MemoryResponse)
async def memory(req: GameRequest):
    try:
        return await get_learn_handler().memory(req.category, req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/quiz", response_model=QuizResponse)
async def quiz(req: GameRequest):
    try:
        return await get_learn_handler().quiz(req.category, req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/buddy", response_model=BuddyResponse)
async def buddy(req: BuddyRequest):
    try:
        return await get_learn_handler().buddy(req.message, req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/translate", response_model=TranslateResponse)
async def translate(req: TranslateRequest):
    try:
        return await get_learn_handler().translate(req.word.strip(), req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
