import logging
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that flood INFO/DEBUG output during crawls and PDF parsing
NOISY_LOGGERS = ("pdfminer", "urllib3", "httpx", "httpcore", "google_genai")


class Logger:
    """Rich console logging for the CLI, mirrored to logs/newsroom.log"""

    @staticmethod
    def setup_logging(log_level: str = "INFO", log_dir: str = "logs",
                      quiet: Iterable[str] = NOISY_LOGGERS) -> logging.Logger:
        level = getattr(logging, log_level.upper(), logging.INFO)
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logging.getLogger().handlers.clear()

        # Console output goes to stderr so query results on stdout stay clean
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False),
                logging.FileHandler(log_path / "newsroom.log", encoding="utf-8"),
            ],
        )

        for name in quiet:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))

        return logging.getLogger("newsroom")
