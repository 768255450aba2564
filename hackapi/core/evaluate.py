"""
core/evaluate.py – heuristics for grading model output in the model lab.
Quality score (1-10) and dictionary check of the Bisayan word on a flashcard.
"""
import re

from ..models import Verification

BISAYAN_DICTIONARY: dict[str, str] = {
    "water": "tubig",
    "house": "balay",
    "tree": "kahoy",
    "sun": "adlaw",
    "moon": "bulan",
    "fire": "kalayo",
    "sea": "dagat",
    "mountain": "bukid",
    "star": "bitoon",
    "world": "kalibutan",
    "food": "pagkaon",
    "book": "basahon",
    "friend": "higala",
    "mother": "nanay",
    "father": "tatay",
    "child": "bata",
    "good": "maayo",
    "big": "dako",
    "small": "gamay",
    "rice": "bugas",
    "hello": "kumusta",
}

COMMON_BISAYAN = ["balay", "tubig", "kahoy", "adlaw", "bulan", "kalayo", "dagat", "bukid", "bitoon", "kalibutan"]

_EMOJI = re.compile(
    "[\U0001F600-\U0001F64F\U0001F300-\U0001F5FF\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF☀-⛿✀-➿]"
)
_BOLD_FRONT = re.compile(r"\*\*Front\*\*:\s*([^|\n]+)", re.I)
_FRONT = re.compile(r"Front:\s*([^|\n]+)", re.I)
# \w minus digits/underscore: letters of any script, emoji excluded
_NON_LETTER = re.compile(r"[\W\d_]+")


def quality_score(response: str) -> int:
    """Heuristic 1..10: format, emoji, Bisayan vocabulary, explanation, error penalty."""
    score = 5
    if "Front:" in response and "Back:" in response:
        score += 2
    if _EMOJI.search(response):
        score += 1
    lower = response.lower()
    if any(word in lower for word in COMMON_BISAYAN):
        score += 2
    if " - " in response or "meaning" in response:
        score += 1
    if "Error" in response or "failed" in response or len(response) < 20:
        score -= 3
    return max(1, min(10, score))


def extract_front_word(response: str) -> str:
    """Bisayan word on the card front, lower-cased, letters only."""
    m = _FRONT.search(response) or _BOLD_FRONT.search(response)
    if not m:
        return ""
    return _NON_LETTER.sub("", m.group(1)).lower()


def verify_translation(response: str, english_word: str) -> Verification:
    expected = BISAYAN_DICTIONARY.get(english_word.lower(), "")
    got = extract_front_word(response)
    is_correct = bool(expected) and got == expected
    if is_correct:
        explanation = f'✅ Correct! "{got}" is the right Bisayan word for "{english_word}"'
    else:
        explanation = f'❌ Wrong! Expected "{expected}" but got "{got}"'
    return Verification(is_correct=is_correct, correct_answer=expected, explanation=explanation)
