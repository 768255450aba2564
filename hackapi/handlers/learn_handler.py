"""
handlers/learn_handler.py – LearnHandler class.
Orchestrates Ollama + PromptBuilder + ResponseParser + canned decks for the learning games.

Generation is sequential, one item per request. A failed request never fails
the game: that slot gets the canned item at the same position.
"""
import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional, TypeVar

from ..core import fallback
from ..core.ollama import OllamaError, OllamaService
from ..core.parser import ResponseParser
from ..core.prompt import DIALECTS, PromptBuilder
from ..models import (
    BuddyResponse,
    DialectResult,
    Flashcard,
    FlashcardsResponse,
    MemoryCard,
    MemoryResponse,
    QuizQuestion,
    QuizResponse,
    TranslateResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

FLASHCARD_COUNT = 5
MEMORY_CARD_COUNT = 6   # each card becomes a pair → 12 tiles
QUIZ_COUNT = 5


class LearnHandler:
    """Flashcards, memory match, quiz, study buddy and dialect translator."""

    def __init__(
        self,
        ollama: OllamaService,
        prompts: PromptBuilder,
        parser: ResponseParser,
        request_delay: float = 0.5,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._ollama = ollama
        self._prompts = prompts
        self._parser = parser
        self._delay = request_delay
        self._rng = rng or random.Random()

    # ── Games ──────────────────────────────────────────────────────────────────

    async def flashcards(self, category: str, model: Optional[str] = None) -> FlashcardsResponse:
        if not await self._ollama.is_connected():
            logger.info("[Learn] Ollama offline → shuffled canned flashcards (%s)", category)
            deck = self._shuffled(fallback.fallback_cards(category))[:FLASHCARD_COUNT]
            return FlashcardsResponse(category=category, cards=self._renumber(deck))
        cards = await self._generate_cards(category, FLASHCARD_COUNT, model)
        return FlashcardsResponse(category=category, cards=cards)

    async def memory(self, category: str, model: Optional[str] = None) -> MemoryResponse:
        if await self._ollama.is_connected():
            cards = await self._generate_cards(category, MEMORY_CARD_COUNT, model)
        else:
            logger.info("[Learn] Ollama offline → canned memory deck (%s)", category)
            cards = self._renumber(fallback.fallback_cards(category)[:MEMORY_CARD_COUNT])
        return MemoryResponse(category=category, cards=self.make_pairs(cards))

    async def quiz(self, category: str, model: Optional[str] = None) -> QuizResponse:
        if not await self._ollama.is_connected():
            logger.info("[Learn] Ollama offline → canned quiz (%s)", category)
            return QuizResponse(category=category, questions=fallback.fallback_quiz(category))
        canned = fallback.fallback_quiz(category)
        questions = await self._generate(
            QUIZ_COUNT,
            lambda i: self._quiz_question(i, category, model),
            lambda i: canned[i % len(canned)].model_copy(update={"id": i}),
        )
        return QuizResponse(category=category, questions=questions)

    # ── Study buddy / translator ───────────────────────────────────────────────

    async def buddy(self, message: str, model: Optional[str] = None) -> BuddyResponse:
        model = model or self._ollama.default_model
        try:
            reply = await self._ollama.generate(self._prompts.buddy(message), model)
        except OllamaError as e:
            logger.warning("[Learn] buddy failed: %s", e)
            return BuddyResponse(reply=fallback.BUDDY_REPLY, model_used="fallback")
        return BuddyResponse(reply=reply.strip() or fallback.BUDDY_REPLY, model_used=model)

    async def translate(self, word: str, model: Optional[str] = None) -> TranslateResponse:
        results: list[DialectResult] = []
        for n, dialect in enumerate(DIALECTS):
            try:
                text = await self._ollama.generate(self._prompts.translate(word, dialect), model)
                translation, pronunciation = self._parser.parse_translation(text)
                logger.info("[Learn] %s: %s (%s)", dialect.name, translation, pronunciation)
            except OllamaError as e:
                logger.warning("[Learn] translate to %s failed: %s", dialect.name, e)
                translation, pronunciation = fallback.TRANSLATION_FAILED
            results.append(DialectResult(
                dialect=dialect.name, emoji=dialect.emoji,
                translation=translation, pronunciation=pronunciation,
            ))
            if n < len(DIALECTS) - 1:
                await self._pause()
        return TranslateResponse(word=word, results=results)

    # ── Helpers ────────────────────────────────────────────────────────────────

    def make_pairs(self, cards: list[Flashcard]) -> list[MemoryCard]:
        """Each card twice (ids 2i, 2i+1, same pairId), shuffled."""
        tiles = [
            MemoryCard(id=i * 2 + k, pair_id=i, front=c.front, back=c.back, source=c.source)
            for i, c in enumerate(cards)
            for k in (0, 1)
        ]
        return self._shuffled(tiles)

    async def _generate_cards(self, category: str, count: int, model: Optional[str]) -> list[Flashcard]:
        canned = fallback.fallback_cards(category)
        return await self._generate(
            count,
            lambda i: self._flashcard(i, category, model),
            lambda i: canned[i % len(canned)].model_copy(update={"id": i}),
        )

    async def _flashcard(self, i: int, category: str, model: Optional[str]) -> Flashcard:
        text = await self._ollama.generate(self._prompts.flashcard(category), model)
        front, back = self._parser.parse_flashcard(text)
        return Flashcard(id=i, front=front, back=back)

    async def _quiz_question(self, i: int, category: str, model: Optional[str]) -> Optional[QuizQuestion]:
        text = await self._ollama.generate(self._prompts.quiz(category), model)
        parsed = self._parser.parse_quiz(text)
        if parsed is None:
            return None
        question, options, answer = parsed
        return QuizQuestion(
            id=i, question=question, options=options, correct_answer=answer,
            explanation=f"This is a Bisayan language question about {category}.",
        )

    async def _generate(
        self,
        count: int,
        make: Callable[[int], Awaitable[Optional[T]]],
        canned: Callable[[int], T],
    ) -> list[T]:
        """Sequential generation; OllamaError or unparseable reply → canned item at that slot."""
        out: list[T] = []
        for i in range(count):
            try:
                item = await make(i)
            except OllamaError as e:
                logger.warning("[Learn] item %d/%d failed: %s → canned", i + 1, count, e)
                item = None
            if item is None:
                out.append(canned(i))
                continue
            out.append(item)
            if i < count - 1:
                await self._pause()
        return out

    async def _pause(self) -> None:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

    def _shuffled(self, items: list[T]) -> list[T]:
        items = list(items)
        self._rng.shuffle(items)
        return items

    @staticmethod
    def _renumber(cards: list[Flashcard]) -> list[Flashcard]:
        return [c.model_copy(update={"id": i}) for i, c in enumerate(cards)]
