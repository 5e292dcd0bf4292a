import logging

from config import Config
from models.bet import ParsedBet
from parsing import parse_bet_slip_text

logger = logging.getLogger("slip_processor")


def parse_slip_text(text: str) -> ParsedBet:
    return parse_bet_slip_text(text)


def parse_slip_image(img_bytes: bytes, config: Config) -> ParsedBet:
    # Imported lazily so text-only callers never load OpenCV/Tesseract.
    from ocr import extract_text_from_image

    text = extract_text_from_image(img_bytes, config)
    logger.info(f"OCR produced {len(text.splitlines())} lines.")
    return parse_bet_slip_text(text)
