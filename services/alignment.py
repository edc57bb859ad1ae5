from typing import List, Optional
from Levenshtein import distance as levenshtein_distance

from config import Config
from models import WordComparison
from services.phonemes import PhonemeDetector


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase, trim and split on runs of whitespace."""
    return (text or "").lower().split()


def calculate_similarity(first: str, second: str) -> float:
    """Normalized edit-distance similarity in [0, 1]."""
    if not first and not second:
        return 1.0
    if not first or not second:
        return 0.0
    if first == second:
        return 1.0

    distance = levenshtein_distance(first, second)
    similarity = 1 - distance / max(len(first), len(second))
    return min(1.0, max(0.0, similarity))


class WordAligner:
    def __init__(self, detector: Optional[PhonemeDetector] = None):
        self.correct_threshold = Config.CORRECT_WORD_THRESHOLD
        self.detector = detector or PhonemeDetector()

    def align(self, expected: str, spoken: str) -> List[WordComparison]:
        """Pair expected and spoken words by position.

        Missing spoken words become empty strings; extra spoken words are
        ignored. Insertions or deletions mid-phrase shift every following
        pair, which is accepted behavior.
        """
        expected_words = tokenize(expected)
        spoken_words = tokenize(spoken)

        comparisons = []
        for index, expected_word in enumerate(expected_words):
            spoken_word = spoken_words[index] if index < len(spoken_words) else ""
            similarity = calculate_similarity(expected_word, spoken_word)
            comparisons.append(WordComparison(
                expected_word=expected_word,
                spoken_word=spoken_word,
                similarity=similarity,
                is_correct=similarity > self.correct_threshold,
                matched_phonemes=tuple(self.detector.detect(expected_word)),
            ))
        return comparisons
