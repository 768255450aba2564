"""
core/fallback.py – canned Bisayan flashcards and quiz questions.
Used when the local model is down or a single generation fails.
"""
from ..models import Flashcard, QuizQuestion

DEFAULT_CATEGORY = "basic-words"

# category → [(front, back)]
FLASHCARDS: dict[str, list[tuple[str, str]]] = {
    "basic-words": [
        ("🏠 Balay",     "House - A place where we live!"),
        ("🌳 Kahoy",     "Tree - A tall plant with leaves!"),
        ("☀️ Adlaw",     "Sun - The bright star in the sky!"),
        ("🌙 Bulan",     "Moon - The light in the night sky!"),
        ("💧 Tubig",     "Water - What we drink to stay healthy!"),
        ("🔥 Kalayo",    "Fire - The hot orange flame!"),
        ("🌍 Kalibutan", "Earth - Our beautiful planet!"),
        ("⭐ Bitoon",    "Star - Twinkling lights in the sky!"),
        ("🏔️ Bukid",     "Mountain - A very tall hill!"),
        ("🌊 Dagat",     "Ocean - The big blue water!"),
    ],
    "family": [
        ("👨 Tatay",              "Father - Our loving dad!"),
        ("👩 Nanay",              "Mother - Our caring mom!"),
        ("👦 Igsoon nga lalaki",  "Brother - Our brother!"),
        ("👧 Igsoon nga babaye",  "Sister - Our sister!"),
        ("👴 Lolo",               "Grandfather - Our grandpa!"),
        ("👵 Lola",               "Grandmother - Our grandma!"),
        ("👶 Bata",               "Baby - A little child!"),
        ("👪 Pamilya",            "Family - All the people we love!"),
        ("👨‍👩‍👧‍👦 Mga ginikanan",     "Parents - Our mom and dad!"),
        ("👫 Magtiayon",          "Couple - A husband and wife!"),
    ],
    "food": [
        ("🍚 Bugas",    "Rice - The white grain we eat!"),
        ("🍞 Tinapay",  "Bread - Soft food we eat!"),
        ("🍎 Mansanas", "Apple - A red sweet fruit!"),
        ("🍌 Saging",   "Banana - A yellow curved fruit!"),
        ("🥛 Gatas",    "Milk - White drink from cows!"),
        ("🍖 Karneng",  "Meat - Food from animals!"),
        ("🐟 Isda",     "Fish - Swimming food from water!"),
        ("🥚 Itlog",    "Egg - White food from chickens!"),
        ("🧀 Keso",     "Cheese - Yellow food from milk!"),
        ("🍰 Keyk",     "Cake - Sweet dessert for birthdays!"),
    ],
    "greetings": [
        ("👋 Kumusta",         "Hello - A friendly greeting!"),
        ("👋 Kumusta ka",      "Hi - How are you?"),
        ("👋 Paalam",          "Goodbye - See you later!"),
        ("🙏 Salamat",         "Thank you - I appreciate you!"),
        ("😊 Palihug",         "Please - A polite request!"),
        ("😔 Pasayloa",        "Sorry - I made a mistake!"),
        ("🌅 Maayong buntag",  "Good morning - Have a good day!"),
        ("🌞 Maayong hapon",   "Good afternoon - Good afternoon!"),
        ("🌙 Maayong gabii",   "Good evening - Good evening!"),
        ("😴 Maayong gabii",   "Good night - Sleep well!"),
    ],
}

# category → [(question, options, answer letter, explanation)]
QUIZ: dict[str, list[tuple[str, list[str], str, str]]] = {
    "basic-words": [
        ('What is "house" in Bisayan?', ["Iro", "Balay", "Tubig", "Pagkaon"], "B", "Balay means house in Bisayan!"),
        ('What is "water" in Bisayan?', ["Kalayo", "Tubig", "Kahoy", "Adlaw"], "B", "Tubig means water in Bisayan!"),
        ('What is "tree" in Bisayan?', ["Kahoy", "Balay", "Tubig", "Kalayo"], "A", "Kahoy means tree in Bisayan!"),
        ('What is "sun" in Bisayan?', ["Bulan", "Adlaw", "Bitoon", "Kalibutan"], "B", "Adlaw means sun in Bisayan!"),
        ('What is "fire" in Bisayan?', ["Kalayo", "Tubig", "Kahoy", "Balay"], "A", "Kalayo means fire in Bisayan!"),
    ],
    "family": [
        ('What is "father" in Bisayan?', ["Nanay", "Tatay", "Lolo", "Lola"], "B", "Tatay means father in Bisayan!"),
        ('What is "mother" in Bisayan?', ["Tatay", "Nanay", "Lolo", "Lola"], "B", "Nanay means mother in Bisayan!"),
        ('What is "brother" in Bisayan?', ["Igsoon nga babaye", "Igsoon nga lalaki", "Bata", "Pamilya"], "B",
         "Igsoon nga lalaki means brother in Bisayan!"),
        ('What is "sister" in Bisayan?', ["Igsoon nga lalaki", "Igsoon nga babaye", "Bata", "Pamilya"], "B",
         "Igsoon nga babaye means sister in Bisayan!"),
        ('What is "baby" in Bisayan?', ["Bata", "Pamilya", "Mga ginikanan", "Magtiayon"], "A", "Bata means baby in Bisayan!"),
    ],
    "food": [
        ('What is "rice" in Bisayan?', ["Tinapay", "Bugas", "Mansanas", "Saging"], "B", "Bugas means rice in Bisayan!"),
        ('What is "bread" in Bisayan?', ["Bugas", "Tinapay", "Mansanas", "Saging"], "B", "Tinapay means bread in Bisayan!"),
        ('What is "apple" in Bisayan?', ["Mansanas", "Saging", "Gatas", "Karneng"], "A", "Mansanas means apple in Bisayan!"),
        ('What is "banana" in Bisayan?', ["Mansanas", "Saging", "Gatas", "Karneng"], "B", "Saging means banana in Bisayan!"),
        ('What is "milk" in Bisayan?', ["Gatas", "Karneng", "Isda", "Itlog"], "A", "Gatas means milk in Bisayan!"),
    ],
    "greetings": [
        ('What is "hello" in Bisayan?', ["Paalam", "Kumusta", "Salamat", "Palihug"], "B", "Kumusta means hello in Bisayan!"),
        ('What is "goodbye" in Bisayan?', ["Kumusta", "Paalam", "Salamat", "Palihug"], "B", "Paalam means goodbye in Bisayan!"),
        ('What is "thank you" in Bisayan?', ["Salamat", "Palihug", "Pasayloa", "Maayong buntag"], "A",
         "Salamat means thank you in Bisayan!"),
        ('What is "please" in Bisayan?', ["Palihug", "Pasayloa", "Maayong buntag", "Maayong hapon"], "A",
         "Palihug means please in Bisayan!"),
        ('What is "good morning" in Bisayan?', ["Maayong hapon", "Maayong buntag", "Maayong gabii", "Kumusta"], "B",
         "Maayong buntag means good morning in Bisayan!"),
    ],
}

BUDDY_REPLY = "I'm here to help you learn! 🌟 Let's try asking something else!"
TRANSLATION_FAILED = ("Translation failed", "Please try again")


def categories() -> list[str]:
    return list(FLASHCARDS)


def fallback_cards(category: str) -> list[Flashcard]:
    """Canned deck for category; unknown categories get basic-words."""
    deck = FLASHCARDS.get(category, FLASHCARDS[DEFAULT_CATEGORY])
    return [Flashcard(id=i, front=f, back=b, source="fallback") for i, (f, b) in enumerate(deck)]


def fallback_quiz(category: str) -> list[QuizQuestion]:
    deck = QUIZ.get(category, QUIZ[DEFAULT_CATEGORY])
    return [
        QuizQuestion(id=i, question=q, options=list(opts), correct_answer=ans, explanation=expl, source="fallback")
        for i, (q, opts, ans, expl) in enumerate(deck)
    ]
