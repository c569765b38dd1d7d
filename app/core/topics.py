"""Topic and level heuristics for Oxford words.

Words seeded without a topic get one from keyword patterns matched against
their meaning, term and example. Levels are never stored; they are derived
from the term length and a small set of basic words.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping


DEFAULT_TOPIC = "Miscellaneous"


@dataclass(frozen=True)
class TopicMetadata:
    name: str
    icon: str
    description: str


TOPICS_METADATA: tuple[TopicMetadata, ...] = (
    TopicMetadata("Function Words", "⚙️", "Prepositions, conjunctions and pronouns"),
    TopicMetadata("People & Family", "👨‍👩‍👧‍👦", "People and family"),
    TopicMetadata("Home & Housing", "🏠", "Homes and living spaces"),
    TopicMetadata("Food & Drink", "🍳", "Food and drink"),
    TopicMetadata("Clothes & Fashion", "👗", "Clothes and fashion"),
    TopicMetadata("Health & Body", "🏥", "Health and the body"),
    TopicMetadata("School & Education", "🎓", "School and education"),
    TopicMetadata("Work & Jobs", "💼", "Work and occupations"),
    TopicMetadata("Travel & Transport", "✈️", "Travel and transport"),
    TopicMetadata("Sports & Leisure", "⚽", "Sports and free time"),
    TopicMetadata("Media & Communication", "📺", "Media and communication"),
    TopicMetadata("Science & Technology", "💻", "Science and technology"),
    TopicMetadata("Business & Money", "🛍️", "Business and money"),
    TopicMetadata("Nature & Environment", "🌿", "Nature and the environment"),
    TopicMetadata("Weather & Climate", "🌤️", "Weather and climate"),
    TopicMetadata("Animals", "🐕", "Animals"),
    TopicMetadata("Time & Numbers", "📅", "Time and numbers"),
    TopicMetadata("Emotions & Personality", "😊", "Feelings and personality"),
    TopicMetadata("Colors & Shapes", "🎨", "Colours and shapes"),
    TopicMetadata("Art & Culture", "🎭", "Art and culture"),
    TopicMetadata("Law & Crime", "⚖️", "Law and crime"),
    TopicMetadata("Society & Politics", "🏛️", "Society and politics"),
    TopicMetadata("Places & Geography", "🗺️", "Places and geography"),
    TopicMetadata("Plants", "🌱", "Plants"),
    TopicMetadata(DEFAULT_TOPIC, "📦", "Everything else"),
)

TOPIC_NAMES: tuple[str, ...] = tuple(topic.name for topic in TOPICS_METADATA)


def _keywords(*words: str) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(words) + r")\b")


# Order matters: the first matching topic wins.
TOPIC_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Animals", _keywords(
        "animal", "pet", "dog", "cat", "bird", "fish", "horse", "cow", "pig", "sheep",
        "lion", "tiger", "bear", "elephant", "monkey", "zoo", "wild", "domestic",
    )),
    ("Food & Drink", _keywords(
        "food", "eat", "drink", "meal", "fruit", "vegetable", "meat", "bread", "milk",
        "water", "coffee", "tea", "restaurant", "kitchen", "cook", "hungry", "thirsty",
    )),
    ("People & Family", _keywords(
        "family", "parent", "mother", "father", "child", "son", "daughter", "brother",
        "sister", "grandmother", "grandfather", "uncle", "aunt", "cousin", "baby",
        "person", "people", "man", "woman",
    )),
    ("Work & Jobs", _keywords(
        "work", "job", "office", "business", "career", "company", "manager", "employee",
        "boss", "worker", "salary", "professional", "occupation", "industry",
    )),
    ("Travel & Transport", _keywords(
        "travel", "trip", "journey", "vacation", "hotel", "airport", "train", "bus",
        "car", "plane", "boat", "ship", "road", "street", "map", "tourist", "passport",
    )),
    ("Health & Body", _keywords(
        "health", "doctor", "medicine", "hospital", "sick", "ill", "body", "head",
        "hand", "foot", "eye", "ear", "nose", "mouth", "heart", "pain", "medical", "nurse",
    )),
    ("School & Education", _keywords(
        "school", "study", "learn", "student", "teacher", "education", "university",
        "college", "class", "lesson", "book", "read", "write", "exam", "homework",
    )),
    ("Home & Housing", _keywords(
        "house", "home", "room", "kitchen", "bedroom", "bathroom", "living", "garden",
        "furniture", "bed", "table", "chair", "door", "window", "roof", "apartment",
    )),
    ("Sports & Leisure", _keywords(
        "sport", "game", "play", "football", "basketball", "tennis", "swimming",
        "running", "exercise", "gym", "team", "match", "player", "leisure", "hobby",
    )),
    ("Weather & Climate", _keywords(
        "weather", "rain", "sun", "wind", "cloud", "snow", "hot", "cold", "warm", "cool",
        "climate", "temperature", "season", "summer", "winter", "spring", "autumn",
    )),
)

BASIC_WORDS = frozenset({
    "be", "do", "go", "see", "get", "come", "know", "time", "way", "day",
    "man", "new", "old", "say", "her", "his", "she", "him", "may", "use",
    "can", "will", "has", "had", "one", "two", "all", "any", "big", "small",
})


def _field(word: Mapping[str, Any] | Any, name: str) -> str:
    if isinstance(word, Mapping):
        value = word.get(name)
    else:
        value = getattr(word, name, None)
    return value or ""


def get_topic_from_word(word: Mapping[str, Any] | Any) -> str:
    """Return the first topic whose keywords occur in the word's text."""

    combined = " ".join(
        (
            _field(word, "meaning").lower(),
            _field(word, "term").lower(),
            _field(word, "example").lower(),
        )
    )
    for topic, pattern in TOPIC_PATTERNS:
        if pattern.search(combined):
            return topic
    return DEFAULT_TOPIC


def get_level_from_word(word: Mapping[str, Any] | Any) -> str:
    """Classify a word as Beginner, Intermediate or Advanced."""

    term = _field(word, "term")
    meaning = _field(word, "meaning")

    if len(term) <= 4 and term.lower() in BASIC_WORDS:
        return "Beginner"
    if len(term) <= 8 or len(meaning.split(" ")) <= 15:
        return "Intermediate"
    return "Advanced"


__all__ = [
    "BASIC_WORDS",
    "DEFAULT_TOPIC",
    "TOPICS_METADATA",
    "TOPIC_NAMES",
    "TOPIC_PATTERNS",
    "TopicMetadata",
    "get_level_from_word",
    "get_topic_from_word",
]
