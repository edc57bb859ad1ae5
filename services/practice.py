import logging
import random
import re
from typing import Optional, Tuple

from models import DifficultyLevel, PracticeText, VocabularyWord

logger = logging.getLogger(__name__)

DIFFICULTY_LEVELS: Tuple[DifficultyLevel, ...] = (
    DifficultyLevel(level=1, name="A1 Beginner", icon="🌱", color_scheme="green", description="Single words"),
    DifficultyLevel(level=2, name="A2 Elementary", icon="🌿", color_scheme="whatsapp", description="Short phrases"),
    DifficultyLevel(level=3, name="B1 Intermediate", icon="🌳", color_scheme="yellow", description="Simple sentences"),
    DifficultyLevel(level=4, name="B2 Advanced", icon="🔥", color_scheme="orange", description="Complex sentences"),
    DifficultyLevel(level=5, name="C1 Expert", icon="⭐", color_scheme="red", description="Long sentences"),
)

WORDS: Tuple[VocabularyWord, ...] = (
    VocabularyWord(id=1, german="Der Apfel", english="The Apple", word_type="Noun (m)",
                   phrase="einen Apfel essen",
                   example="Ich esse einen Apfel zum Frühstück."),
    VocabularyWord(id=2, german="Gehen", english="To Go", word_type="Verb",
                   phrase="ins Kino gehen",
                   example="Wir gehen heute Abend ins Kino."),
    VocabularyWord(id=3, german="Das Haus", english="The House", word_type="Noun (n)",
                   phrase="ein großes Haus",
                   example="Das Haus am Ende der Straße ist sehr groß."),
    VocabularyWord(id=4, german="Schnell", english="Fast", word_type="Adjective",
                   phrase="sehr schnell fahren",
                   example="Das Auto fährt schnell auf der Autobahn."),
    VocabularyWord(id=5, german="Die Katze", english="The Cat", word_type="Noun (f)",
                   phrase="die kleine Katze",
                   example="Die Katze schläft auf dem Sofa."),
    VocabularyWord(id=6, german="Hören", english="To Hear/Listen", word_type="Verb",
                   phrase="Musik hören",
                   example="Kannst du mich hören, wenn ich spreche?"),
    VocabularyWord(id=7, german="Das Wasser", english="The Water", word_type="Noun (n)",
                   phrase="kaltes Wasser trinken",
                   example="Ich trinke jeden Tag viel Wasser."),
    VocabularyWord(id=8, german="Morgen", english="Tomorrow/Morning", word_type="Adverb/Noun",
                   phrase="morgen früh",
                   example="Bis morgen, schlaf gut!"),
    VocabularyWord(id=9, german="Danke", english="Thank you", word_type="Phrase",
                   phrase="Danke schön",
                   example="Danke schön für deine Hilfe!"),
    VocabularyWord(id=10, german="Tschüss", english="Bye", word_type="Phrase",
                   phrase="Tschüss, bis bald",
                   example="Tschüss, bis bald! Wir sehen uns morgen."),
    VocabularyWord(id=11, german="Der Hund", english="The Dog", word_type="Noun (m)",
                   phrase="der große Hund",
                   example="Der Hund bellt laut im Garten."),
    VocabularyWord(id=12, german="Leben", english="To Live", word_type="Verb",
                   phrase="in Berlin leben",
                   example="Sie leben seit fünf Jahren in Berlin."),
    VocabularyWord(id=13, german="Die Zeit", english="The Time", word_type="Noun (f)",
                   phrase="keine Zeit haben",
                   example="Ich habe heute leider keine Zeit."),
    VocabularyWord(id=14, german="Arbeiten", english="To Work", word_type="Verb",
                   phrase="zu Hause arbeiten",
                   example="Er arbeitet jeden Tag sehr viel."),
    VocabularyWord(id=15, german="Glücklich", english="Happy", word_type="Adjective",
                   phrase="sehr glücklich sein",
                   example="Sie ist sehr glücklich über die Nachricht."),
    VocabularyWord(id=16, german="Die Schule", english="The School", word_type="Noun (f)",
                   phrase="in die Schule gehen",
                   example="Die Schule beginnt um acht Uhr morgens."),
    VocabularyWord(id=17, german="Lernen", english="To Learn", word_type="Verb",
                   phrase="Deutsch lernen",
                   example="Wir lernen jeden Tag neue deutsche Wörter."),
    VocabularyWord(id=18, german="Der Stift", english="The Pen", word_type="Noun (m)",
                   phrase="einen Stift brauchen",
                   example="Wo ist mein Stift? Ich muss etwas schreiben."),
    VocabularyWord(id=19, german="Heute", english="Today", word_type="Adverb",
                   phrase="heute Nachmittag",
                   example="Heute ist ein wunderschöner Tag!"),
    VocabularyWord(id=20, german="Machen", english="To Do/Make", word_type="Verb",
                   phrase="Hausaufgaben machen",
                   example="Was machst du heute Abend?"),
    VocabularyWord(id=21, german="Die Arbeit", english="The Work", word_type="Noun (f)",
                   phrase="zur Arbeit gehen",
                   example="Die Arbeit ist heute besonders schwer."),
    VocabularyWord(id=22, german="Fragen", english="To Ask", word_type="Verb",
                   phrase="eine Frage stellen",
                   example="Darf ich etwas fragen? Es ist wichtig."),
    VocabularyWord(id=23, german="Das Buch", english="The Book", word_type="Noun (n)",
                   phrase="ein gutes Buch lesen",
                   example="Das Buch ist sehr interessant und spannend."),
    VocabularyWord(id=24, german="Sehen", english="To See", word_type="Verb",
                   phrase="einen Film sehen",
                   example="Ich sehe dich am Bahnhof um drei."),
    VocabularyWord(id=25, german="Vielleicht", english="Maybe", word_type="Adverb",
                   phrase="vielleicht morgen",
                   example="Vielleicht komme ich später zur Party."),
    VocabularyWord(id=26, german="Die Freundin", english="The Girlfriend/Friend (f)", word_type="Noun (f)",
                   phrase="meine beste Freundin",
                   example="Das ist meine Freundin aus der Schule."),
    VocabularyWord(id=27, german="Essen", english="To Eat", word_type="Verb",
                   phrase="zu Abend essen",
                   example="Wann essen wir heute zu Abend?"),
    VocabularyWord(id=28, german="Wichtig", english="Important", word_type="Adjective",
                   phrase="sehr wichtig sein",
                   example="Das ist sehr wichtig für mich."),
    VocabularyWord(id=29, german="Der Bahnhof", english="The Train Station", word_type="Noun (m)",
                   phrase="zum Bahnhof fahren",
                   example="Der Zug hält am Bahnhof in der Stadtmitte."),
    VocabularyWord(id=30, german="Entschuldigung", english="Excuse me", word_type="Phrase",
                   phrase="Entschuldigung bitte",
                   example="Entschuldigung, darf ich bitte vorbei?"),
)

_WORDS_BY_ID = {word.id: word for word in WORDS}
_FIRST_SENTENCE = re.compile(r"^.*?[.!?]")


def get_difficulty(level: int) -> DifficultyLevel:
    for difficulty in DIFFICULTY_LEVELS:
        if difficulty.level == level:
            return difficulty
    raise ValueError(f"Unknown difficulty level {level}, expected 1-{len(DIFFICULTY_LEVELS)}")


def get_word(word_id: int) -> VocabularyWord:
    return _WORDS_BY_ID[word_id]


def build_practice_text(word: VocabularyWord, level: int) -> str:
    """Turn a vocabulary entry into the text to read aloud at a difficulty level.

    1: the word, 2: its phrase, 3: first sentence of the example,
    4: the full example, 5: the example followed by the phrase's meaning.
    """
    get_difficulty(level)

    if level == 1:
        return word.german
    if level == 2:
        return word.phrase or word.german
    if level == 3:
        match = _FIRST_SENTENCE.match(word.example)
        return match.group(0) if match else word.example
    if level == 4:
        return word.example
    if word.phrase:
        return f"{word.example} Das bedeutet: {word.phrase}."
    return word.example


def get_practice_text(level: int = 1,
                      word_id: Optional[int] = None,
                      rng: Optional[random.Random] = None) -> PracticeText:
    """Pick a word (random unless word_id is given) and build its practice text.

    Raises ValueError for an unknown level and KeyError for an unknown word id.
    """
    difficulty = get_difficulty(level)
    if word_id is None:
        word = (rng or random).choice(WORDS)
    else:
        word = get_word(word_id)

    text = build_practice_text(word, level)
    logger.debug(f"Practice text for word {word.id} at level {level}: {text!r}")

    return PracticeText(
        word_id=word.id,
        german=word.german,
        english=word.english,
        word_type=word.word_type,
        difficulty=difficulty,
        text=text,
    )
