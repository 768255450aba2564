"""routes/ollama.py – thin proxy to the local Ollama server.

  GET  /api/ollama          → {status: connected|disconnected, models}
  POST /api/ollama          → {prompt, model?} → {response, model}
  GET  /api/ollama/models   → installed models (Ollama /api/tags)
"""
from fastapi import APIRouter, HTTPException, Response

from ..core.ollama import OllamaError
from ..deps import get_ollama
from ..models import GenerateRequest, GenerateResponse, OllamaStatus

router = APIRouter(prefix="/api/ollama", tags=["Ollama"])

_NO_CACHE = {"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache", "Expires": "0"}


@router.get("", response_model=OllamaStatus)
async def status():
    return await get_ollama().status()


@router.post("", response_model=GenerateResponse)
async def generate(req: GenerateRequest):
    service = get_ollama()
    model = req.model or service.default_model
    try:
        return GenerateResponse(response=await service.generate(req.prompt, model), model=model)
    except OllamaError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/models")
async def models(response: Response):
    response.headers.update(_NO_CACHE)
    try:
        return {"models": await get_ollama().list_models()}
    except OllamaError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
