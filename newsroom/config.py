"""
Configuration management for Newsroom AI

Settings are read from environment variables (and an optional .env file).
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings from environment variables"""

    # Storage locations
    DATA_DIR: str = os.getenv("DATA_DIR", "data")
    AGENDA_DIR: str = os.getenv("AGENDA_DIR", "2025_city_council_agendas")
    CORPUS_FILENAME: str = "processing_results.json"
    SCRAPE_FILENAME: str = "longbeach_complete_scrape.json"
    REPORT_FILENAME: str = "scraping_report.json"

    # Crawl target
    BASE_URL: str = os.getenv("BASE_URL", "https://www.longbeachny.gov")
    TARGET_DOMAIN: str = os.getenv("TARGET_DOMAIN", "longbeachny.gov")
    MAX_PAGES: int = int(os.getenv("MAX_PAGES", 500))
    CRAWL_DELAY: float = float(os.getenv("CRAWL_DELAY", 2.0))
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", 30))
    STALE_AFTER_HOURS: int = int(os.getenv("STALE_AFTER_HOURS", 24))

    # Corpus behaviour
    DEDUP_WEB_DOCUMENTS: bool = _env_bool("DEDUP_WEB_DOCUMENTS", "true")

    # Summarizer configuration
    LLM_MODEL: str = os.getenv("LLM_MODEL", "gemini-2.0-flash")
    GOOGLE_API_KEY: Optional[str] = os.getenv("GOOGLE_API_KEY")
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", 0.7))
    LLM_MAX_OUTPUT_TOKENS: int = int(os.getenv("LLM_MAX_OUTPUT_TOKENS", 250))
    SUMMARY_CHAR_BUDGET: int = int(os.getenv("SUMMARY_CHAR_BUDGET", 4000))

    # Search configuration
    TOP_K: int = int(os.getenv("TOP_K", 3))

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server configuration
    PORT: int = int(os.getenv("PORT", 8000))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    RELOAD: bool = _env_bool("RELOAD", "false")

    # API configuration
    API_TITLE: str = "Newsroom AI"
    API_DESCRIPTION: str = "Query Long Beach city council agendas and city website pages"
    API_VERSION: str = "1.0.0"

    # CORS configuration
    CORS_ORIGINS: list = ["*"]

    @property
    def corpus_path(self) -> str:
        return os.path.join(self.DATA_DIR, self.CORPUS_FILENAME)

    @classmethod
    def get_example_queries(cls) -> list[str]:
        """Get example queries for API documentation"""
        return [
            "budget",
            "What did the council approve for parks?",
            "beach permits",
            "water meter replacement project",
            "How do I apply for a mercantile license?",
        ]


# Global settings instance
settings = Settings()
