import logging
import uuid
from typing import List, Optional
from fastapi import FastAPI, HTTPException, Query

from config import Config
from models import (
    AnalyzeRequest,
    DetectRequest,
    DetectResponse,
    DifficultyLevel,
    PhonemeRule,
    PracticeText,
    PronunciationResult,
)
from services.phonemes import GERMAN_PHONEMES, PhonemeDetector, get_rule
from services.practice import DIFFICULTY_LEVELS, get_practice_text
from services.pronunciation import PronunciationAnalyzer

# Configure logging
logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

app = FastAPI(title=Config.APP_NAME, version=Config.APP_VERSION)

# Initialize services (stateless, shared by all requests)
pronunciation_analyzer = PronunciationAnalyzer()
phoneme_detector = PhonemeDetector()


def _check_length(request_id: str, field: str, value: Optional[str]) -> None:
    if value and len(value) > Config.MAX_TEXT_LENGTH:
        logging.warning(f"[{request_id}] Rejected {field}: {len(value)} characters")
        raise HTTPException(
            status_code=400,
            detail=f"{field} exceeds {Config.MAX_TEXT_LENGTH} characters"
        )


@app.post("/analyze", response_model=PronunciationResult)
def analyze_pronunciation(request: AnalyzeRequest):
    """
    Scores a speech-to-text transcript against the expected German text.
    """
    request_id = str(uuid.uuid4())[:8]
    _check_length(request_id, "expected_text", request.expected_text)
    _check_length(request_id, "spoken_text", request.spoken_text)

    logging.info(f"[{request_id}] Analyzing pronunciation of {request.expected_text!r}")

    try:
        result = pronunciation_analyzer.analyze_pronunciation(
            request.expected_text,
            request.spoken_text,
            request.confidence
        )
    except Exception as e:
        logging.error(f"[{request_id}] Analysis error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to analyze pronunciation")

    logging.info(
        f"[{request_id}] Score {result.overall_score} ({result.fluency_rating.band}), "
        f"{len(result.tips)} tips"
    )
    return result


@app.post("/phonemes/detect", response_model=DetectResponse)
def detect_phonemes(request: DetectRequest):
    """Lists the German pronunciation hazards found in a text."""
    request_id = str(uuid.uuid4())[:8]
    _check_length(request_id, "text", request.text)

    phonemes = phoneme_detector.detect(request.text)
    logging.info(f"[{request_id}] Detected {[p.id for p in phonemes]} in {request.text!r}")
    return DetectResponse(text=request.text, phonemes=phonemes)


@app.get("/phonemes", response_model=List[PhonemeRule])
def list_phonemes():
    return list(GERMAN_PHONEMES)


@app.get("/phonemes/{rule_id}", response_model=PhonemeRule)
def get_phoneme(rule_id: str):
    try:
        return get_rule(rule_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown phoneme rule: {rule_id}")


@app.get("/practice/levels", response_model=List[DifficultyLevel])
def list_difficulty_levels():
    return list(DIFFICULTY_LEVELS)


@app.get("/practice", response_model=PracticeText)
def practice_text(difficulty: int = Query(1), word_id: Optional[int] = Query(None)):
    """
    Returns a text to read aloud for the given difficulty (1-5).
    A random word is used unless word_id is given.
    """
    try:
        return get_practice_text(difficulty, word_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown word id: {word_id}")


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": f"{Config.APP_NAME} is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=Config.HOST, port=Config.PORT, reload=True)
