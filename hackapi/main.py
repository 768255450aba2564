"""
main.py – FastAPI app entry point (slim wire-up only).
Connects routes and lifespan. No business logic here.
"""
import logging
from contextlib import asynccontextmanager
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import system, items, stores, checkout, auth, account, learn, ollama, lab, progress
from .deps import get_items, get_progress

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Preparing data directory…")
    get_items().ensure_data_dir()
    get_progress().init_db()
    logger.info("Ready.")
    yield
    logger.info("Shutdown.")


app = FastAPI(
    title="SurpriseMePH + Bisayan Learner API",
    description="Food-surplus marketplace and a local-LLM language-learning demo.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(system.router)
app.include_router(items.router)
app.include_router(stores.router)
app.include_router(checkout.router)
app.include_router(auth.router)
app.include_router(account.router)
app.include_router(learn.router)
app.include_router(ollama.router)
app.include_router(lab.router)
app.include_router(progress.router)
