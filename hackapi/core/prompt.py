"""
core/prompt.py – PromptBuilder class.
Builds the prompts sent to the local model for each learning game.
"""
from dataclasses import dataclass

LANGUAGE = "Bisayan (Cebuano)"
AUDIENCE = "5-year-olds"


@dataclass(frozen=True)
class Dialect:
    name: str
    emoji: str
    code: str


DIALECTS: list[Dialect] = [
    Dialect("Cebuano (Bisayan)", "🏠", "cebuano"),
    Dialect("Tagalog",           "🏢", "tagalog"),
    Dialect("Ilocano",           "🏔️", "ilocano"),
    Dialect("Waray",             "🌊", "waray"),
]

FLASHCARD_FORMAT = "Front: [emoji] [Bisayan word] | Back: [English word] - [English meaning]"


class PromptBuilder:
    """Prompt templates. Every template asks for a fixed line format the parser understands."""

    def flashcard(self, category: str) -> str:
        return (
            f"Create ONE {LANGUAGE} language flashcard about {category} for {AUDIENCE}.\n\n"
            "Respond ONLY in this exact format:\n"
            f"{FLASHCARD_FORMAT}\n\n"
            "Example:\n"
            "Front: 🐕 Iro | Back: Dog - A friendly pet that loves to play!\n\n"
            "Rules:\n"
            "- Use a fun emoji\n"
            "- Front shows Bisayan word\n"
            "- Back shows English word followed by English meaning\n"
            "- Make it educational and fun for kids\n"
            "- Keep descriptions short and kid-friendly (under 20 words)\n"
            "- Just ONE card, no extra text\n"
            "- Use common Bisayan words that kids can learn"
        )

    def quiz(self, category: str) -> str:
        return (
            f"Create ONE multiple choice quiz question about {LANGUAGE} language "
            f"for {AUDIENCE} about {category}.\n\n"
            "Respond ONLY in this exact format:\n"
            "Question: [Question text]\n"
            "A) [Option A]\n"
            "B) [Option B]\n"
            "C) [Option C]\n"
            "D) [Option D]\n"
            "Answer: [Correct answer letter]\n\n"
            "Example:\n"
            'Question: What is "house" in Bisayan?\n'
            "A) Iro\n"
            "B) Balay\n"
            "C) Tubig\n"
            "D) Pagkaon\n"
            "Answer: B\n\n"
            "Rules:\n"
            "- Make it educational and fun for kids\n"
            "- Use common Bisayan words\n"
            "- Keep questions simple and clear\n"
            "- Only ONE question, no extra text\n"
            "- Make sure the correct answer is accurate"
        )

    def buddy(self, message: str) -> str:
        return (
            f"You are a friendly {LANGUAGE} language teacher for 5-year-old children. "
            f'A child asks: "{message}".\n'
            f"Please give a helpful, age-appropriate response about Bisayan language that "
            "encourages learning and curiosity.\n"
            "Include Bisayan words and their English meanings. Keep it simple, fun, and under "
            "100 words. Use emojis when appropriate!\n"
            "Focus on teaching Bisayan vocabulary, phrases, or grammar in a fun way for kids."
        )

    def translate(self, word: str, dialect: Dialect) -> str:
        return (
            f'Translate the English word "{word}" to {dialect.name}.\n\n'
            "Respond ONLY in this exact format:\n"
            f"Translation: [word in {dialect.name}]\n"
            "Pronunciation: [how to say it]\n\n"
            "Example:\n"
            "Translation: Balay\n"
            "Pronunciation: bah-LAY\n\n"
            "Rules:\n"
            f"- Use authentic {dialect.name} vocabulary\n"
            "- Provide pronunciation guide\n"
            "- Just the translation and pronunciation, no extra text"
        )

    @staticmethod
    def lab_flashcard(english_word: str) -> str:
        """Short one-line flashcard prompt used by the model lab."""
        return f'Create a {LANGUAGE} flashcard for "{english_word}". Format: {FLASHCARD_FORMAT}'

    @staticmethod
    def lab_sentence(sentence: str) -> str:
        return f'Translate this English sentence to {LANGUAGE}: "{sentence}"'
