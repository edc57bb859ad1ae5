import re
from pydantic import BaseModel, ConfigDict, PrivateAttr
from typing import Any, List, Literal, Optional, Tuple

class PhonemeRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    pattern: str  # regex over lowercased text
    name: str
    ipa: str
    tip: str
    common_mistake: str
    examples: Tuple[str, ...]

    _matcher: re.Pattern = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._matcher = re.compile(self.pattern)

    def matches(self, text: str) -> bool:
        return self._matcher.search(text) is not None

class WordComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    expected_word: str
    spoken_word: str
    similarity: float
    is_correct: bool
    matched_phonemes: Tuple[PhonemeRule, ...] = ()

class FluencyRating(BaseModel):
    model_config = ConfigDict(frozen=True)

    band: str
    label: str
    emoji: str
    color: str

class Tip(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error", "success", "correction", "phoneme"]
    icon: str
    text: str
    priority: int
    # correction tips
    expected: Optional[str] = None
    spoken: Optional[str] = None
    # phoneme tips
    phoneme_id: Optional[str] = None
    name: Optional[str] = None
    ipa: Optional[str] = None
    common_mistake: Optional[str] = None
    examples: Optional[Tuple[str, ...]] = None

class PronunciationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int
    word_comparisons: Tuple[WordComparison, ...]
    detected_phonemes: Tuple[PhonemeRule, ...]
    fluency_rating: FluencyRating
    tips: Tuple[Tip, ...]
    recognizer_confidence: int

class AnalyzeRequest(BaseModel):
    expected_text: str
    spoken_text: Optional[str] = ""
    confidence: Optional[float] = None

class DetectRequest(BaseModel):
    text: str

class DetectResponse(BaseModel):
    text: str
    phonemes: List[PhonemeRule]

class DifficultyLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    name: str
    icon: str
    color_scheme: str
    description: str

class VocabularyWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    german: str
    english: str
    word_type: str
    phrase: Optional[str] = None
    example: str

class PracticeText(BaseModel):
    word_id: int
    german: str
    english: str
    word_type: str
    difficulty: DifficultyLevel
    text: str
