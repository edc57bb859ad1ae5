"""
Word alignment and similarity tests
"""
import pytest
from services.alignment import WordAligner, calculate_similarity, levenshtein_distance, tokenize


class TestSimilarity:
    """Edit-distance similarity"""

    def test_tokenize_lowercases_and_splits_on_whitespace(self):
        """Whitespace runs collapse, case is folded"""
        assert tokenize("  Der   Apfel\t ist\nrot ") == ["der", "apfel", "ist", "rot"]

    def test_tokenize_empty(self):
        """Empty or missing text gives no tokens"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize(None) == []

    def test_levenshtein_distance(self):
        """Classic textbook distances"""
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("haus", "haus") == 0
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("straße", "strasse") == 2

    def test_identical_words(self):
        """Identical words are fully similar"""
        assert calculate_similarity("apfel", "apfel") == 1.0

    def test_empty_word(self):
        """One empty side scores zero, both empty scores one"""
        assert calculate_similarity("apfel", "") == 0.0
        assert calculate_similarity("", "apfel") == 0.0
        assert calculate_similarity("", "") == 1.0

    def test_normalized_by_longer_word(self):
        """Distance is divided by the longer length"""
        assert calculate_similarity("apfel", "apfen") == pytest.approx(0.8)
        assert calculate_similarity("hund", "hunde") == pytest.approx(0.8)
        assert calculate_similarity("abc", "xyz") == 0.0

    def test_similarity_stays_in_range(self):
        """Completely different words never go negative"""
        assert 0.0 <= calculate_similarity("a", "zzzzzzzz") <= 1.0


class TestWordAligner:
    """Positional word pairing"""

    @pytest.fixture
    def aligner(self):
        return WordAligner()

    def test_case_insensitive(self, aligner):
        """Case differences do not count as errors"""
        comparisons = aligner.align("Der Apfel", "der apfel")
        assert [c.expected_word for c in comparisons] == ["der", "apfel"]
        assert all(c.is_correct for c in comparisons)
        assert all(c.similarity == 1.0 for c in comparisons)

    def test_correct_threshold_is_strict(self, aligner):
        """Similarity of exactly 0.8 is not correct"""
        comparison = aligner.align("apfel", "apfen")[0]
        assert comparison.similarity == pytest.approx(0.8)
        assert comparison.is_correct is False

    def test_above_threshold_is_correct(self, aligner):
        """Similarity just above 0.8 is correct"""
        comparison = aligner.align("wasser", "wassar")[0]
        assert comparison.similarity > 0.8
        assert comparison.is_correct is True

    def test_missing_spoken_words(self, aligner):
        """Short transcripts leave trailing words empty"""
        comparisons = aligner.align("Ich gehe nach Hause", "ich gehe")
        assert len(comparisons) == 4
        assert comparisons[2].spoken_word == ""
        assert comparisons[3].spoken_word == ""
        assert comparisons[2].similarity == 0.0
        assert not comparisons[2].is_correct
        assert not comparisons[3].is_correct

    def test_extra_spoken_words_ignored(self, aligner):
        """Words beyond the expected text are not reported"""
        comparisons = aligner.align("Danke", "danke schön und tschüss")
        assert len(comparisons) == 1
        assert comparisons[0].is_correct

    def test_empty_transcript(self, aligner):
        """No speech pairs every word with an empty string"""
        comparisons = aligner.align("Ich spreche Deutsch", "")
        assert [c.spoken_word for c in comparisons] == ["", "", ""]
        assert not any(c.is_correct for c in comparisons)

    def test_pairing_is_positional(self, aligner):
        """A dropped word shifts the following pairs"""
        comparisons = aligner.align("ich gehe nach hause", "ich nach hause")
        assert comparisons[0].is_correct
        assert comparisons[1].spoken_word == "nach"
        assert not comparisons[1].is_correct
        assert comparisons[3].spoken_word == ""

    def test_word_phonemes_attached(self, aligner):
        """Each comparison carries the hazards of its expected word"""
        comparisons = aligner.align("das Mädchen", "das mädchen")
        ids = [rule.id for rule in comparisons[1].matched_phonemes]
        assert "umlaut_ae" in ids
        assert "ch_ich" in ids
        assert comparisons[0].matched_phonemes == ()
