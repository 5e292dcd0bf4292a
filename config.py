import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass
class Config:
    # OCR
    ocr_confidence_threshold: float = 0.35
    tesseract_config: str = r"--oem 3 --psm 6"
    ocr_language: str = "eng"

    # Retry faint screenshots with contrast variants
    multipass_enabled: bool = True
    low_confidence_retry_threshold: float = 0.25

    # Debug
    debug_logging: bool = False
    log_format: str = DEFAULT_LOG_FORMAT

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug_logging else logging.INFO

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            ocr_confidence_threshold=float(os.environ.get("OCR_CONF", "0.35")),
            tesseract_config=os.environ.get("TESSERACT_CONFIG", r"--oem 3 --psm 6"),
            ocr_language=os.environ.get("OCR_LANG", "eng"),
            multipass_enabled=os.environ.get("MULTIPASS", "true").lower() == "true",
            low_confidence_retry_threshold=float(os.environ.get("LOW_CONF_RETRY", "0.25")),
            debug_logging=os.environ.get("DEBUG_LOGGING", "false").lower() == "true",
            log_format=os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )
