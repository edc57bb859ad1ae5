from typing import List, Sequence
from config import Config
from models import PhonemeRule, Tip, WordComparison
from services.phonemes import CHALLENGING_PHONEME_IDS

ERROR_PRIORITY = 1
SUCCESS_PRIORITY = 1
CORRECTION_PRIORITY = 2
PHONEME_PRIORITY = 3

class FeedbackGenerator:
    def __init__(self):
        self.max_correction_tips = Config.MAX_CORRECTION_TIPS
        self.challenging_ids = CHALLENGING_PHONEME_IDS

    def generate_feedback(self,
                          word_comparisons: Sequence[WordComparison],
                          detected_phonemes: Sequence[PhonemeRule],
                          spoken_text_empty: bool) -> List[Tip]:
        """Build the prioritized tip list for one attempt.

        Order of signals: did we hear anything at all, then word-level
        corrections (at most ``max_correction_tips``), then coaching for the
        challenging sounds found in the expected text.
        """
        if spoken_text_empty:
            return [Tip(
                kind="error",
                icon="🎤",
                text="No speech detected. Make sure your microphone is working and speak clearly.",
                priority=ERROR_PRIORITY,
            )]

        tips: List[Tip] = []
        problematic_words = [word for word in word_comparisons if not word.is_correct]

        if not problematic_words:
            tips.append(Tip(
                kind="success",
                icon="🎉",
                text="Perfect pronunciation! Ausgezeichnet!",
                priority=SUCCESS_PRIORITY,
            ))
        else:
            for word in problematic_words[:self.max_correction_tips]:
                heard = word.spoken_word or "(nothing)"
                tips.append(Tip(
                    kind="correction",
                    icon="🔄",
                    text=f'"{word.expected_word}" → you said "{heard}"',
                    priority=CORRECTION_PRIORITY,
                    expected=word.expected_word,
                    spoken=word.spoken_word,
                ))

        for phoneme in detected_phonemes:
            if phoneme.id in self.challenging_ids:
                tips.append(Tip(
                    kind="phoneme",
                    icon="💡",
                    text=phoneme.tip,
                    priority=PHONEME_PRIORITY,
                    phoneme_id=phoneme.id,
                    name=phoneme.name,
                    ipa=phoneme.ipa,
                    common_mistake=phoneme.common_mistake,
                    examples=phoneme.examples,
                ))

        # sorted() is stable, equal priorities keep insertion order
        return sorted(tips, key=lambda tip: tip.priority)

    def nothing_to_compare(self) -> List[Tip]:
        """Tip list for an attempt without any expected text."""
        return [Tip(
            kind="error",
            icon="📝",
            text="Nothing to compare. Choose a German word or phrase to practice first.",
            priority=ERROR_PRIORITY,
        )]
