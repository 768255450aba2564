"""
tests/test_parser.py – ResponseParser layered fallbacks.
  - flashcard: labels → pipe → lines → raw text
  - quiz: labels → line scan → None
  - translation: defaults when labels are missing
"""
import pytest

from hackapi.core.parser import ResponseParser


@pytest.fixture
def parser():
    return ResponseParser()


class TestFlashcard:
    def test_labelled_single_line(self, parser):
        assert parser.parse_flashcard("Front: 🐕 Iro | Back: Dog - A friendly pet!") == (
            "🐕 Iro", "Dog - A friendly pet!",
        )

    def test_labelled_two_lines(self, parser):
        text = "Sure! Here it is:\nFront: 🏠 Balay\nBack: House - A place where we live!"
        assert parser.parse_flashcard(text) == ("🏠 Balay", "House - A place where we live!")

    def test_pipe_without_labels(self, parser):
        assert parser.parse_flashcard("💧 Tubig | Water - What we drink") == ("💧 Tubig", "Water - What we drink")

    def test_leading_pipe_is_not_a_split(self, parser):
        front, back = parser.parse_flashcard("| nothing useful here")
        assert front.startswith("🎯 ")
        assert back.endswith("...")

    def test_raw_text(self, parser):
        text = "I am sorry, I cannot create a flashcard right now, please ask again later."
        front, back = parser.parse_flashcard(text)
        assert front == "🎯 I am sorry,"
        assert back == text[:50] + "..."

    def test_line_scan_when_labels_and_pipe_give_empty_front(self, parser):
        # labels and pipe both see an empty front; the line scan still finds two non-empty sides
        assert parser.parse_flashcard("Front:  | Back: x") == ("| Back: x", "Front:  | x")

    def test_line_scan_strategy(self, parser):
        assert parser._card_from_lines("Front: 🐕 Iro\nBack: Dog - A friendly pet!") == (
            "🐕 Iro", "Dog - A friendly pet!",
        )
        assert parser._card_from_lines("Front: 🐕 Iro") is None


class TestQuiz:
    def test_labelled(self, parser):
        text = 'Question: What is "house"?\nA) Iro\nB) Balay\nC) Tubig\nD) Pagkaon\nAnswer: b'
        assert parser.parse_quiz(text) == ('What is "house"?', ["Iro", "Balay", "Tubig", "Pagkaon"], "B")

    def test_line_fallback_defaults_answer_to_a(self, parser):
        text = "What is water in Bisayan?\nA) Tubig\nB) Balay\nC) Kahoy\nD) Adlaw"
        question, options, answer = parser.parse_quiz(text)
        assert question == "What is water in Bisayan?"
        assert options == ["Tubig", "Balay", "Kahoy", "Adlaw"]
        assert answer == "A"

    def test_line_fallback_keeps_missing_options_empty(self, parser):
        question, options, _ = parser.parse_quiz("Question:\nA) Tubig")
        assert question == "Bisayan language question"
        assert options == ["Tubig", "", "", ""]

    @pytest.mark.parametrize("text", ["", "   \n\n  "])
    def test_empty_is_unparseable(self, parser, text):
        assert parser.parse_quiz(text) is None


class TestTranslation:
    def test_both(self, parser):
        assert parser.parse_translation("Translation: Bahay\nPronunciation: BAH-hai") == ("Bahay", "BAH-hai")

    def test_defaults(self, parser):
        assert parser.parse_translation("no idea") == ("Translation not found", "Pronunciation not available")
