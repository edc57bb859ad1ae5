import logging
import math
from typing import Any, Optional, Tuple
from config import Config
from models import FluencyRating, PronunciationResult
from services.alignment import WordAligner, tokenize
from services.feedback_generator import FeedbackGenerator
from services.phonemes import PhonemeDetector

logger = logging.getLogger(__name__)

# (minimum score, rating), evaluated top-down
FLUENCY_BANDS: Tuple[Tuple[int, FluencyRating], ...] = (
    (90, FluencyRating(band="excellent", label="Ausgezeichnet!", emoji="🌟", color="#22C55E")),
    (75, FluencyRating(band="very_good", label="Sehr gut!", emoji="✨", color="#3B82F6")),
    (60, FluencyRating(band="good", label="Gut!", emoji="👍", color="#F59E0B")),
    (40, FluencyRating(band="keep_practicing", label="Weiter üben!", emoji="💪", color="#F97316")),
)
LOWEST_BAND = FluencyRating(band="try_again", label="Versuch es nochmal!", emoji="🔄", color="#EF4444")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_fluency_rating(score: int) -> FluencyRating:
    for minimum, rating in FLUENCY_BANDS:
        if score >= minimum:
            return rating
    return LOWEST_BAND


def normalize_confidence(confidence: Any) -> int:
    """Scale a recognizer confidence in [0, 1] to an integer percentage.

    Missing, NaN or non-numeric values count as 0; anything outside [0, 1]
    is clamped.
    """
    if confidence is None or isinstance(confidence, bool):
        return 0
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        return 0
    if math.isnan(value):
        return 0
    value = min(1.0, max(0.0, value))
    return round_half_up(value * 100)


class PronunciationAnalyzer:
    def __init__(self):
        self.match_threshold = Config.MATCH_THRESHOLD
        self.detector = PhonemeDetector()
        self.aligner = WordAligner(self.detector)
        self.feedback_generator = FeedbackGenerator()

    def analyze_pronunciation(self,
                              expected_text: str,
                              spoken_text: Optional[str] = "",
                              recognizer_confidence: Optional[float] = None) -> PronunciationResult:
        """Score a transcript against the phrase the learner was asked to say"""
        confidence = normalize_confidence(recognizer_confidence)

        if not tokenize(expected_text):
            logger.debug("Empty expected text, returning zero result")
            return PronunciationResult(
                overall_score=0,
                word_comparisons=(),
                detected_phonemes=(),
                fluency_rating=LOWEST_BAND,
                tips=tuple(self.feedback_generator.nothing_to_compare()),
                recognizer_confidence=confidence,
            )

        word_comparisons = self.aligner.align(expected_text, spoken_text or "")

        matched_words = sum(1 for word in word_comparisons if word.similarity > self.match_threshold)
        overall_score = round_half_up(matched_words / len(word_comparisons) * 100)

        detected_phonemes = self.detector.detect(expected_text)

        spoken_text_empty = not (spoken_text or "").strip()
        tips = self.feedback_generator.generate_feedback(
            word_comparisons,
            detected_phonemes,
            spoken_text_empty
        )

        logger.debug(
            f"Scored {matched_words}/{len(word_comparisons)} words -> {overall_score}, "
            f"{len(detected_phonemes)} phonemes, {len(tips)} tips"
        )

        return PronunciationResult(
            overall_score=overall_score,
            word_comparisons=tuple(word_comparisons),
            detected_phonemes=tuple(detected_phonemes),
            fluency_rating=get_fluency_rating(overall_score),
            tips=tuple(tips),
            recognizer_confidence=confidence,
        )


_default_analyzer = PronunciationAnalyzer()


def analyze(expected_text: str,
            spoken_text: Optional[str] = "",
            recognizer_confidence: Optional[float] = None) -> PronunciationResult:
    """Module-level shortcut over a shared, stateless analyzer."""
    return _default_analyzer.analyze_pronunciation(expected_text, spoken_text, recognizer_confidence)
