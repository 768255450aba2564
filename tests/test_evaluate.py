"""
tests/test_evaluate.py – model lab heuristics: quality score + dictionary check.
"""
import pytest

from hackapi.core.evaluate import extract_front_word, quality_score, verify_translation


class TestQualityScore:
    def test_perfect_card(self):
        assert quality_score("Front: 💧 Tubig | Back: Water - What we drink") == 10

    def test_short_error(self):
        assert quality_score("Error: timeout") == 2

    def test_clamped_low(self):
        assert quality_score("failed") >= 1

    def test_plain_text(self):
        assert quality_score("This is a long enough answer without any format.") == 5


class TestExtractFrontWord:
    @pytest.mark.parametrize("text,expected", [
        ("Front: 💧 Tubig | Back: Water", "tubig"),
        ("**Front**: 🏠 Balay | **Back**: House", "balay"),
        ("Front: Iro123!", "iro"),
        ("Front: 💧 Tubig\nBack: Water - What we drink", "tubig"),
        ("**Front**: 🏠 Balay\n**Back**: House", "balay"),
        ("no card here", ""),
    ])
    def test_extract(self, text, expected):
        assert extract_front_word(text) == expected


class TestVerify:
    def test_correct(self):
        v = verify_translation("Front: 💧 Tubig | Back: Water", "water")
        assert v.is_correct
        assert v.correct_answer == "tubig"
        assert v.explanation.startswith("✅")

    def test_wrong(self):
        v = verify_translation("Front: 🏠 Balay | Back: House", "water")
        assert not v.is_correct
        assert 'Expected "tubig" but got "balay"' in v.explanation

    def test_unknown_english_word(self):
        assert not verify_translation("Front: Iro | Back: Dog", "dog").is_correct

    def test_two_line_card(self):
        v = verify_translation("Front: 💧 Tubig\nBack: Water - What we drink!", "water")
        assert v.is_correct
