import logging
from typing import Dict, Any, List

import numpy as np
import cv2
import pytesseract

from config import Config

logger = logging.getLogger("ocr")


def decode_image(image_bytes: bytes) -> np.ndarray:
    np_data = np.frombuffer(image_bytes, np.uint8)
    img = cv2.imdecode(np_data, cv2.IMREAD_COLOR) if np_data.size else None
    if img is None:
        raise ValueError("Failed to decode image bytes.")
    return img


def _auto_deskew(gray: np.ndarray) -> np.ndarray:
    # Angle of the box around the dark (text) pixels, folded into [-45, 45].
    _, ink = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY_INV | cv2.THRESH_OTSU)
    coords = cv2.findNonZero(ink)
    if coords is None:
        return gray
    angle = cv2.minAreaRect(coords)[-1]
    if angle > 45:
        angle -= 90
    elif angle < -45:
        angle += 90
    if abs(angle) < 0.5:
        return gray
    (h, w) = gray.shape[:2]
    M = cv2.getRotationMatrix2D((w // 2, h // 2), angle, 1.0)
    return cv2.warpAffine(gray, M, (w, h), flags=cv2.INTER_CUBIC, borderMode=cv2.BORDER_REPLICATE)


def preprocess_for_ocr(image_bgr: np.ndarray) -> np.ndarray:
    gray = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2GRAY)
    gray = cv2.fastNlMeansDenoising(gray, h=10, templateWindowSize=7, searchWindowSize=21)
    gray = cv2.equalizeHist(gray)
    gray = _auto_deskew(gray)
    return cv2.adaptiveThreshold(
        gray, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C, cv2.THRESH_BINARY, 31, 8
    )


def _contrast_variants(image_bgr: np.ndarray) -> List[np.ndarray]:
    # Faint slips (dark mode, low brightness) read better after a contrast boost.
    gray = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2GRAY)
    variants = []
    for alpha in (1.3, 1.6):
        adj = cv2.convertScaleAbs(gray, alpha=alpha, beta=0)
        variants.append(
            cv2.adaptiveThreshold(adj, 255, cv2.ADAPTIVE_THRESH_MEAN_C, cv2.THRESH_BINARY, 31, 5)
        )
    return variants


def run_tesseract(image: np.ndarray, config: Config) -> Dict[str, Any]:
    data = pytesseract.image_to_data(
        image, lang=config.ocr_language, output_type=pytesseract.Output.DICT, config=config.tesseract_config
    )
    text = pytesseract.image_to_string(image, lang=config.ocr_language, config=config.tesseract_config)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("OCR text preview:\n" + text)
    return {"raw_text": text, "data": data}


def extract_text_blocks(ocr_result: Dict[str, Any], min_conf: float) -> str:
    """Rebuild lines from Tesseract word boxes, keeping words at or above min_conf."""
    data = ocr_result["data"]
    lines = {}
    for i in range(len(data["text"])):
        conf = float(data["conf"][i])
        if conf < 0 or conf / 100.0 < min_conf:
            continue
        token = data["text"][i].strip()
        if not token:
            continue
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines.setdefault(key, "")
        lines[key] += ((" " if lines[key] else "") + token)
    return "\n".join([lines[k] for k in sorted(lines.keys()) if lines[k]])


def _read(image: np.ndarray, config: Config, min_conf: float) -> str:
    res = run_tesseract(image, config)
    return extract_text_blocks(res, min_conf) or res["raw_text"].strip()


def extract_text_from_image(image_bytes: bytes, config: Config) -> str:
    """
    OCR a bet slip screenshot into raw multi-line text.

    Raises ValueError for bytes that are not a decodable image. Tesseract
    errors propagate unchanged.
    """
    image_bgr = decode_image(image_bytes)
    text = _read(preprocess_for_ocr(image_bgr), config, config.ocr_confidence_threshold)
    if not text and config.multipass_enabled:
        for variant in _contrast_variants(image_bgr):
            text = _read(variant, config, config.low_confidence_retry_threshold)
            if text:
                logger.info("Recovered slip text from a contrast variant.")
                break
    return text
