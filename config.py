from dotenv import load_dotenv
import os

load_dotenv()

# Configuration class for the application
class Config:
    APP_NAME = "German Pronunciation Evaluation Service"
    APP_VERSION = "1.0.0"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server configuration
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))

    # Input limits (API layer only)
    MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "500"))

    if MAX_TEXT_LENGTH <= 0:
        raise ValueError("MAX_TEXT_LENGTH must be a positive integer")

    # Analysis thresholds
    CORRECT_WORD_THRESHOLD = 0.8  # similarity strictly above -> word is correct
    MATCH_THRESHOLD = 0.7  # similarity strictly above -> counts towards the score
    MAX_CORRECTION_TIPS = 2
