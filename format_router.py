import logging
import re
from typing import Iterable, List

logger = logging.getLogger("format_router")

# Sportsbook UI chrome and OCR debris that never carries bet data.
NOISE_PATTERNS = [
    re.compile(r"^My Bets$", re.I),
    re.compile(r"Settled|Open", re.I),
    re.compile(r"Recent", re.I),
    re.compile(r"^o\)?\\?"),  # stray "o", "o)" or "o)\" at line start
    re.compile(r"^[0-9\s]*BMA", re.I),  # e.g. "32 BMA"
]


def normalize_lines(text: str) -> List[str]:
    # Trimmed, non-empty lines in their original order.
    stripped = (line.strip() for line in (text or "").split("\n"))
    return [line for line in stripped if line]


def dedupe_adjacent(lines: Iterable[str]) -> List[str]:
    """Collapse runs of identical consecutive lines; OCR often repeats a row."""
    out: List[str] = []
    for line in lines:
        if not out or out[-1] != line:
            out.append(line)
    return out


def is_noise_line(line: str) -> bool:
    return any(p.search(line) for p in NOISE_PATTERNS)


def filter_noise(lines: Iterable[str], consumed: Iterable[str] = ()) -> List[str]:
    """Drop lines already used by another pass (exact match) and every noise line."""
    skip = {c for c in consumed if c}
    return [line for line in lines if line not in skip and not is_noise_line(line)]


def route_text(text: str) -> List[str]:
    lines = dedupe_adjacent(normalize_lines(text))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Routed {len(lines)} lines:\n" + "\n".join(lines))
    return lines
