"""routes/progress.py – learner progress counters.

  GET    /api/progress/{learner_id}
  POST   /api/progress/{learner_id}/flashcards  → +count viewed
  POST   /api/progress/{learner_id}/memory      → finished memory game
  POST   /api/progress/{learner_id}/quiz        → finished quiz (+ verdict)
  DELETE /api/progress/{learner_id}
"""
from fastapi import APIRouter, HTTPException, Path

from ..core.progress import quiz_verdict
from ..deps import get_progress
from ..models import (
    FlashcardsViewedRequest,
    MemoryResultRequest,
    OkResponse,
    ProgressStats,
    QuizResultRequest,
    QuizResultResponse,
)

router = APIRouter(prefix="/api/progress", tags=["Progress"])

LearnerId = Path(..., min_length=1, max_length=64, pattern=r"^[\w.-]+$")


@router.get("/{learner_id}", response_model=ProgressStats)
async def get_stats(learner_id: str = LearnerId):
    try:
        return await get_progress().get(learner_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{learner_id}/flashcards", response_model=ProgressStats)
async def flashcards_viewed(req: FlashcardsViewedRequest, learner_id: str = LearnerId):
    try:
        return await get_progress().record_flashcards(learner_id, req.count)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{learner_id}/memory", response_model=ProgressStats)
async def memory_finished(req: MemoryResultRequest, learner_id: str = LearnerId):
    try:
        return await get_progress().record_memory(learner_id, req.score)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/{learner_id}/quiz", response_model=QuizResultResponse)
async def quiz_finished(req: QuizResultRequest, learner_id: str = LearnerId):
    try:
        stats = await get_progress().record_quiz(learner_id, req.correct, req.total)
        return QuizResultResponse(verdict=quiz_verdict(req.correct, req.total), progress=stats)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{learner_id}", response_model=OkResponse)
async def reset(learner_id: str = LearnerId):
    try:
        await get_progress().reset(learner_id)
        return OkResponse()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
