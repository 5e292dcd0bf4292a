"""
Test harness for slip intake.
Usage:
    python tests/run_slip_intake.py <image_or_text_path>

This will:
- Load the image and run OCR (or read a .txt OCR dump as-is)
- Route text through format_router (normalize + dedupe)
- Show the cleaned lines the field passes work on
- Parse into a ParsedBet and print it
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import Config  # noqa: E402
from format_router import filter_noise, route_text  # noqa: E402
from parsing import consumed_lines, parse_bet_slip_text  # noqa: E402


def main(path: str):
    config = Config.from_env()
    logging.basicConfig(level=config.log_level, format=config.log_format)

    if path.lower().endswith(".txt"):
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    else:
        from ocr import extract_text_from_image

        text = extract_text_from_image(Path(path).read_bytes(), config)
    print("=== OCR TEXT ===")
    print(text)

    routed = route_text(text)
    print("\n=== ROUTED LINES ({}) ===".format(len(routed)))
    print("\n".join(routed))

    parsed = parse_bet_slip_text(text)
    cleaned = filter_noise(routed, consumed=consumed_lines(routed))
    print("\n=== CLEANED LINES ({}) ===".format(len(cleaned)))
    print("\n".join(cleaned))

    print("\n=== PARSED BET ===")
    print(f"Type: {parsed.type} | Odds: {parsed.odds}")
    print(f"Game: {parsed.game} | Start: {parsed.start_time}")
    print(f"Stake: {parsed.stake}, Payout: {parsed.payout}")
    print(f"Bet ID: {parsed.bet_id}, Placed: {parsed.placed_at}")
    for i, leg in enumerate(parsed.legs, start=1):
        print(f"Leg {i}: {leg.player} | {leg.action}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tests/run_slip_intake.py <image_or_text_path>")
        sys.exit(1)
    main(sys.argv[1])
