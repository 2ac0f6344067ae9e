# typed_digest/config.py
from dotenv import load_dotenv, find_dotenv
import os
import logging

# Load nearest .env from project tree, don't override existing process env
load_dotenv(find_dotenv(usecwd=True), override=False)

logger = logging.getLogger(__name__)

class Settings:
    """Environment configuration for typed-data hashing."""
    
    LOG_LEVEL = (os.getenv("LOG_LEVEL") or "WARNING").strip().upper()
    
    # Nested struct encoding guard
    MAX_STRUCT_DEPTH = int(os.getenv("MAX_STRUCT_DEPTH", "64"))
    
    # Signer key, only read by `typed-digest --sign`
    TYPED_DIGEST_PRIVATE_KEY = (os.getenv("TYPED_DIGEST_PRIVATE_KEY") or "").strip()

    def __init__(self):
        if self.MAX_STRUCT_DEPTH < 1:
            logger.warning(f"MAX_STRUCT_DEPTH={self.MAX_STRUCT_DEPTH} is below 1, using 1")
            self.MAX_STRUCT_DEPTH = 1

settings = Settings()
