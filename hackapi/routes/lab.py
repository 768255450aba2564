"""routes/lab.py – model lab: grade installed models on Bisayan prompts."""
from fastapi import APIRouter, HTTPException

from ..core.ollama import OllamaError
from ..deps import get_lab_handler
from ..models import LabRequest, LabResult

router = APIRouter(prefix="/api/lab", tags=["Model Lab"])


@router.post("/bisayan", response_model=list[LabResult])
async def bisayan_suite(req: LabRequest):
    """Five Bisayan prompts (4 flashcards + 1 sentence) against one model."""
    try:
        return await get_lab_handler().run_suite(req.model)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/all-models", response_model=list[LabResult])
async def all_models():
    """The `water` flashcard prompt against every installed model."""
    try:
        return await get_lab_handler().run_all_models()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OllamaError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
