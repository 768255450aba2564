"""
deps.py – Dependency Injection: singleton service instances.
Built once at import time from environment variables (.env loaded in main.py).
"""
import os
from .core.account import AccountService
from .core.auth import OtpService
from .core.browse import StoreDirectory
from .core.catalog import ItemStore
from .core.checkout import CheckoutService
from .core.excel import ExcelImporter
from .core.ollama import OllamaService
from .core.parser import ResponseParser
from .core.progress import ProgressService
from .core.prompt import PromptBuilder
from .handlers.lab_handler import LabHandler
from .handlers.learn_handler import LearnHandler
from .handlers.store_handler import StoreHandler
from .handlers.upload_handler import UploadHandler

DATA_DIR = os.getenv("DATA_DIR", "./data")

# ── Core singletons ────────────────────────────────────────────────────────────

_items    = ItemStore(data_dir=DATA_DIR)
_stores   = StoreDirectory()
_importer = ExcelImporter()
_checkout = CheckoutService()
_otp      = OtpService(demo_otp=os.getenv("DEMO_OTP", "123456"))
_account  = AccountService()
_progress = ProgressService(data_dir=DATA_DIR)
_ollama   = OllamaService(
    base_url=os.getenv("OLLAMA_URL", "http://localhost:11434"),
    default_model=os.getenv("OLLAMA_MODEL", "llama3.2:3b"),
    timeout=float(os.getenv("OLLAMA_TIMEOUT", "10")),
)

# ── Handler singletons ─────────────────────────────────────────────────────────

_store_h  = StoreHandler(_items, _stores)
_upload_h = UploadHandler(_importer, _items)
_learn_h  = LearnHandler(
    _ollama, PromptBuilder(), ResponseParser(),
    request_delay=float(os.getenv("OLLAMA_REQUEST_DELAY", "0.5")),
)
_lab_h    = LabHandler(_ollama)


# ── Getters (used in routes) ───────────────────────────────────────────────────

def get_items()          -> ItemStore:       return _items
def get_checkout()       -> CheckoutService: return _checkout
def get_otp()            -> OtpService:      return _otp
def get_account()        -> AccountService:  return _account
def get_progress()       -> ProgressService: return _progress
def get_ollama()         -> OllamaService:   return _ollama
def get_store_handler()  -> StoreHandler:    return _store_h
def get_upload_handler() -> UploadHandler:   return _upload_h
def get_learn_handler()  -> LearnHandler:    return _learn_h
def get_lab_handler()    -> LabHandler:      return _lab_h
