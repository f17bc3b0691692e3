from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path

class Settings(BaseSettings):
    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent
    INPUT_DIR: Path = BASE_DIR / "data" / "input"
    OUTPUT_DIR: Path = BASE_DIR / "data" / "output"
    LOG_DIR: Path = BASE_DIR / "data" / "logs"

    # Skill library store (Supabase / PostgREST)
    SKILL_LIBRARY_URL: Optional[str] = None
    SKILL_LIBRARY_KEY: Optional[str] = None
    SKILL_LIBRARY_TABLE: str = "Skill library"
    SKILL_LIBRARY_TIMEOUT: float = 10.0
    SKILL_LIBRARY_RETRIES: int = 3
    SKILL_LIBRARY_RETRY_MIN_WAIT: float = 1.0
    SKILL_LIBRARY_RETRY_MAX_WAIT: float = 4.0
    SKILL_TAXONOMY_FILE: Optional[Path] = None
    MAX_TAXONOMY_TERMS: int = 5000

    # Document Processing
    MAX_DOCUMENT_SIZE: int = 50 * 1024 * 1024  # 50MB
    MAX_TEXT_LENGTH: int = 100000
    MIN_TEXT_LENGTH: int = 50
    STRUCTURED_TEXT_MIN_LENGTH: int = 100
    USE_PARSER_LIBRARIES: bool = True
    SUPPORTED_FORMATS: list = ["pdf", "docx", "txt"]

    # Skill matching
    MIN_CONFIDENCE: float = 15.0
    MAX_RESULTS: int = 50
    MAX_CONTEXTS: int = 3
    CONTEXT_MAX_LENGTH: int = 200
    MAX_SENTENCES: int = 5000
    FUZZY_MATCHING: bool = True
    FUZZY_MIN_LENGTH: int = 7
    FUZZY_THRESHOLD: float = 0.9
    FUZZY_MAX_TOKENS: int = 5000

    # Domain rules
    TECH_DOMAIN_MIN_SKILLS: int = 2
    MANAGEMENT_DOMAIN_MIN_SKILLS: int = 2

    # Performance
    MAX_MEMORY_PERCENT: int = 80
    CACHE_ENABLED: bool = True
    CACHE_TTL: int = 3600

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
