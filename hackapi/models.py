"""
models.py – Pydantic schemas for request/response.
JSON keys are camelCase (same as data/items.json); snake_case is accepted on input.
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List, Literal


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ── Catalog ────────────────────────────────────────────────────────────────────

class Item(CamelModel):
    store_name: str
    store_address_url: str = ""
    food_name: str
    qty: int = Field(default=0, ge=0)
    original_price_php: float = Field(default=0, ge=0)
    discounted_price_php: float = Field(default=0, ge=0)
    surprise_group: Optional[str] = None


class ItemsResponse(BaseModel):
    items: List[Item]


class UploadResponse(BaseModel):
    ok: bool = True
    count: int


# ── Browse / Store ─────────────────────────────────────────────────────────────

SortKey = Literal["distance", "price", "rating"]


class StoreGroup(CamelModel):
    store_name: str
    store_address_url: str
    slug: str
    rating: float
    distance_km: float
    min_price_php: float
    items: List[Item]


class SelectionRequest(BaseModel):
    indices: List[int] = Field(default=[], description="Indexes into the store's item list")


class OrderSummary(CamelModel):
    items: List[Item]
    total_php: float
    original_php: float
    saved_php: float


# ── Checkout ───────────────────────────────────────────────────────────────────

class CheckoutRequest(BaseModel):
    items: Any = Field(default=None, description="List of Item; anything else is rejected with 400")
    method: Optional[str] = None
    provider: Optional[str] = None
    payment: Literal["cash", "card", "wallet"] = "cash"
    wallet: Literal["gcash", "maya"] = "gcash"


class CheckoutResponse(CamelModel):
    ok: bool = True
    eta_mins: int
    provider_link: Optional[str] = None
    payment: str
    summary: OrderSummary


# ── Auth ───────────────────────────────────────────────────────────────────────

class RequestOtpRequest(CamelModel):
    full_name: str = ""
    mobile: str = ""
    email: Optional[str] = None


class RequestOtpResponse(CamelModel):
    ok: bool = True
    otp_hint: str


class VerifyOtpRequest(BaseModel):
    mobile: str = ""
    otp: str = ""


class OkResponse(BaseModel):
    ok: bool = True


# ── Account ────────────────────────────────────────────────────────────────────

class LoyaltyStamp(BaseModel):
    index: int
    earned: bool
    label: str = ""


class PastOrder(BaseModel):
    store: str
    date: str


class AccountResponse(CamelModel):
    name: str
    mobile: str
    email: str
    past_orders: List[PastOrder]
    stamps: List[LoyaltyStamp]
    rewards_note: str
    vouchers: List[str] = []


# ── Learning ───────────────────────────────────────────────────────────────────

Source = Literal["model", "fallback"]


class Flashcard(BaseModel):
    id: int
    front: str
    back: str
    source: Source = "model"


class MemoryCard(CamelModel):
    id: int
    pair_id: int
    front: str
    back: str
    source: Source = "model"


class QuizQuestion(CamelModel):
    id: int
    question: str
    options: List[str]
    correct_answer: Literal["A", "B", "C", "D"]
    explanation: str = ""
    source: Source = "model"


class DialectResult(BaseModel):
    dialect: str
    emoji: str
    translation: str
    pronunciation: str


class GameRequest(BaseModel):
    category: str = Field(..., min_length=1, description="basic-words | family | food | greetings")
    model: Optional[str] = Field(default=None, description="Ollama model, default from OLLAMA_MODEL")


class FlashcardsResponse(BaseModel):
    category: str
    cards: List[Flashcard]


class MemoryResponse(BaseModel):
    category: str
    cards: List[MemoryCard]


class QuizResponse(BaseModel):
    category: str
    questions: List[QuizQuestion]


class BuddyRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=1000)
    model: Optional[str] = None


class BuddyResponse(BaseModel):
    reply: str
    model_used: str


class TranslateRequest(BaseModel):
    word: str = Field(..., min_length=1, max_length=200)
    model: Optional[str] = None


class TranslateResponse(BaseModel):
    word: str
    results: List[DialectResult]


# ── Ollama proxy ───────────────────────────────────────────────────────────────

class GenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    model: Optional[str] = None


class GenerateResponse(BaseModel):
    response: str
    model: str


class OllamaStatus(BaseModel):
    status: Literal["connected", "disconnected"]
    models: List[dict] = []


# ── Model lab ──────────────────────────────────────────────────────────────────

class Verification(CamelModel):
    is_correct: bool
    correct_answer: str
    explanation: str


class LabResult(CamelModel):
    test: str
    model: str
    response: str
    response_time: int = Field(description="Milliseconds")
    timestamp: str
    quality_score: int
    ok: bool = True
    verification: Optional[Verification] = None


class LabRequest(BaseModel):
    model: str = Field(..., min_length=1)


# ── Progress ───────────────────────────────────────────────────────────────────

class GameStats(CamelModel):
    games: int = 0
    best_score: int = 0
    last_score: int = 0


class ProgressStats(CamelModel):
    learner_id: str
    total_games_completed: int = 0
    flashcards_viewed: int = 0
    memory_match: GameStats = GameStats()
    quiz: GameStats = GameStats()


class FlashcardsViewedRequest(BaseModel):
    count: int = Field(default=1, ge=1, le=1000)


class MemoryResultRequest(BaseModel):
    score: int = Field(..., ge=0)


class QuizResultRequest(BaseModel):
    correct: int = Field(..., ge=0)
    total: int = Field(..., ge=1)


class QuizResultResponse(BaseModel):
    verdict: str
    progress: ProgressStats
