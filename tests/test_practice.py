"""
Practice text tests
"""
import random
import pytest
from services.practice import (
    DIFFICULTY_LEVELS,
    WORDS,
    build_practice_text,
    get_difficulty,
    get_practice_text,
    get_word,
)


class TestPracticeTexts:
    """Difficulty levels and word list"""

    def test_builtin_data(self):
        """Thirty words, five levels with unique ids"""
        assert len(WORDS) == 30
        assert len({word.id for word in WORDS}) == 30
        assert [level.level for level in DIFFICULTY_LEVELS] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("level, expected", [
        (1, "Der Apfel"),
        (2, "einen Apfel essen"),
        (3, "Ich esse einen Apfel zum Frühstück."),
        (4, "Ich esse einen Apfel zum Frühstück."),
        (5, "Ich esse einen Apfel zum Frühstück. Das bedeutet: einen Apfel essen."),
    ])
    def test_levels_for_first_word(self, level, expected):
        """Each level reads a longer text"""
        assert get_practice_text(level, 1).text == expected

    def test_first_sentence_only(self):
        """Level 3 stops after the first sentence"""
        word = get_word(10)
        assert build_practice_text(word, 3) == "Tschüss, bis bald!"
        assert build_practice_text(word, 4) == "Tschüss, bis bald! Wir sehen uns morgen."

    def test_question_kept_whole(self):
        """A single question is its own first sentence"""
        word = get_word(6)
        assert build_practice_text(word, 3) == "Kannst du mich hören, wenn ich spreche?"

    def test_practice_metadata(self):
        """The response carries the word and level"""
        practice = get_practice_text(3, 13)
        assert practice.word_id == 13
        assert practice.german == "Die Zeit"
        assert practice.english == "The Time"
        assert practice.word_type == "Noun (f)"
        assert practice.difficulty == get_difficulty(3)

    def test_random_word_is_reproducible_with_seed(self):
        """An explicit rng makes the choice deterministic"""
        first = get_practice_text(2, rng=random.Random(7))
        second = get_practice_text(2, rng=random.Random(7))
        assert first == second
        assert first.word_id in {word.id for word in WORDS}

    @pytest.mark.parametrize("level", [0, 6, -1])
    def test_unknown_level(self, level):
        """Levels outside 1-5 are rejected"""
        with pytest.raises(ValueError):
            get_practice_text(level, 1)

    def test_unknown_word(self):
        """Unknown word ids are rejected"""
        with pytest.raises(KeyError):
            get_practice_text(1, 999)
