"""
handlers/lab_handler.py – LabHandler class.
Model lab: run fixed Bisayan prompts against installed models and grade the replies.
"""
import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.evaluate import quality_score, verify_translation
from ..core.ollama import OllamaError, OllamaService
from ..core.prompt import PromptBuilder
from ..models import LabResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabTest:
    name: str
    prompt: str
    english_word: Optional[str] = None   # set → verify the Bisayan word on the card


BISAYAN_SUITE: list[LabTest] = [
    LabTest("Basic Vocabulary", PromptBuilder.lab_flashcard("house"), "house"),
    LabTest("Family Terms", PromptBuilder.lab_flashcard("mother"), "mother"),
    LabTest("Food Items", PromptBuilder.lab_flashcard("rice"), "rice"),
    LabTest("Greetings", PromptBuilder.lab_flashcard("hello"), "hello"),
    LabTest("Complex Sentence", PromptBuilder.lab_sentence("The child is playing with the dog in the house.")),
]
ALL_MODELS_TEST = LabTest("Water Flashcard", PromptBuilder.lab_flashcard("water"), "water")


class LabHandler:
    def __init__(self, ollama: OllamaService, test_delay: float = 1.0, model_delay: float = 2.0) -> None:
        self._ollama = ollama
        self._test_delay = test_delay
        self._model_delay = model_delay

    async def run_suite(self, model: str) -> list[LabResult]:
        """Every BISAYAN_SUITE prompt against one model."""
        results = []
        for n, test in enumerate(BISAYAN_SUITE):
            results.append(await self.run_test(model, test))
            if n < len(BISAYAN_SUITE) - 1 and self._test_delay > 0:
                await asyncio.sleep(self._test_delay)
        return results

    async def run_all_models(self) -> list[LabResult]:
        """The water flashcard prompt against every installed model."""
        models = [m.get("name", "") for m in await self._ollama.list_models()]
        models = [m for m in models if m]
        if not models:
            raise ValueError("No models available")
        results = []
        for n, model in enumerate(models):
            results.append(await self.run_test(model, ALL_MODELS_TEST))
            if n < len(models) - 1 and self._model_delay > 0:
                await asyncio.sleep(self._model_delay)
        return results

    async def run_test(self, model: str, test: LabTest) -> LabResult:
        started = time.perf_counter()
        try:
            response = await self._ollama.generate(test.prompt, model)
            ok = True
        except OllamaError as e:
            logger.warning("[Lab] %s on %s failed: %s", test.name, model, e)
            response, ok = f"Error: {e}", False
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return LabResult(
            test=test.name,
            model=model,
            response=response,
            response_time=elapsed_ms,
            timestamp=datetime.now().isoformat(),
            quality_score=quality_score(response),
            ok=ok,
            verification=verify_translation(response, test.english_word) if ok and test.english_word else None,
        )
