"""
core/parser.py – ResponseParser class.
Turns free-text model output into flashcard / quiz / translation fields.

Each parse tries its strategies in order and keeps the first one that yields
every required field. Flashcards always produce something; quizzes return
None when nothing usable is left, so the caller can substitute a canned question.
"""
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

CardSides = tuple[str, str]
QuizFields = tuple[str, list[str], str]

_FRONT = re.compile(r"Front:\s*([^|\n]+)", re.I)
_BACK = re.compile(r"Back:\s*(.+)", re.I)
_FRONT_LABEL = re.compile(r"Front:\s*", re.I)
_BACK_LABEL = re.compile(r"Back:\s*", re.I)

_QUESTION = re.compile(r"Question:\s*(.+)", re.I)
_OPTIONS = [re.compile(rf"{letter}\)\s*(.+)", re.I) for letter in "ABCD"]
_ANSWER = re.compile(r"Answer:\s*([ABCD])", re.I)
_OPTION_LINE = re.compile(r"^([ABCD])\)\s*")
_QUESTION_LABEL = re.compile(r"Question:\s*", re.I)

_TRANSLATION = re.compile(r"Translation:\s*(.+)", re.I)
_PRONUNCIATION = re.compile(r"Pronunciation:\s*(.+)", re.I)

DEFAULT_QUESTION = "Bisayan language question"
NO_TRANSLATION = "Translation not found"
NO_PRONUNCIATION = "Pronunciation not available"


class ResponseParser:
    """Pattern-matching parsers with layered fallbacks."""

    # ── Flashcard ──────────────────────────────────────────────────────────────

    def parse_flashcard(self, text: str) -> CardSides:
        """(front, back). Labelled → pipe split → line scan → canned from raw text."""
        for name, strategy in (
            ("labels", self._card_from_labels),
            ("pipe", self._card_from_pipe),
            ("lines", self._card_from_lines),
        ):
            sides = strategy(text)
            if sides:
                logger.debug("Flashcard parsed with %s: %r", name, sides)
                return sides
        logger.info("Flashcard unparseable, building card from raw text")
        return self._card_from_raw(text)

    def _card_from_labels(self, text: str) -> Optional[CardSides]:
        front, back = _FRONT.search(text), _BACK.search(text)
        if not (front and back):
            return None
        return self._both(front.group(1), back.group(1))

    def _card_from_pipe(self, text: str) -> Optional[CardSides]:
        if text.find("|") <= 0:
            return None
        parts = text.split("|")
        return self._both(_FRONT_LABEL.sub("", parts[0], count=1), _BACK_LABEL.sub("", parts[1], count=1))

    def _card_from_lines(self, text: str) -> Optional[CardSides]:
        front = back = ""
        for line in text.splitlines():
            if "Front:" in line and not front:
                front = _FRONT_LABEL.sub("", line, count=1).strip()
            if "Back:" in line and not back:
                back = _BACK_LABEL.sub("", line, count=1).strip()
        return self._both(front, back)

    @staticmethod
    def _card_from_raw(text: str) -> CardSides:
        words = " ".join(text.split(" ")[:3])
        return f"🎯 {words}", text[:50] + "..."

    @staticmethod
    def _both(front: str, back: str) -> Optional[CardSides]:
        front, back = front.strip(), back.strip()
        return (front, back) if front and back else None

    # ── Quiz ───────────────────────────────────────────────────────────────────

    def parse_quiz(self, text: str) -> Optional[QuizFields]:
        """(question, [A, B, C, D], answer letter) or None when nothing usable."""
        question, options, answer = self._quiz_from_labels(text)
        if question and options[0] and answer:
            return question, options, answer

        lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
        if not lines:
            return None
        question = _QUESTION_LABEL.sub("", lines[0], count=1).strip() or DEFAULT_QUESTION
        for line in lines[1:5]:
            m = _OPTION_LINE.match(line)
            if m:
                options["ABCD".index(m.group(1))] = line[m.end():].strip()
        answer = answer or "A"
        logger.info("Quiz parsed with line fallback: %r (answer %s)", question, answer)
        return question, options, answer

    @staticmethod
    def _quiz_from_labels(text: str) -> tuple[str, list[str], str]:
        q = _QUESTION.search(text)
        a = _ANSWER.search(text)
        options = []
        for pattern in _OPTIONS:
            m = pattern.search(text)
            options.append(m.group(1).strip() if m else "")
        return (
            q.group(1).strip() if q else "",
            options,
            a.group(1).upper() if a else "",
        )

    # ── Translation ────────────────────────────────────────────────────────────

    def parse_translation(self, text: str) -> tuple[str, str]:
        t = _TRANSLATION.search(text)
        p = _PRONUNCIATION.search(text)
        return (
            t.group(1).strip() if t else NO_TRANSLATION,
            p.group(1).strip() if p else NO_PRONUNCIATION,
        )
