import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import Config
from services.payout import PayoutCalculator, format_currency, sanitize_stake_input
from services.slip_processor import parse_slip_image, parse_slip_text

logger = logging.getLogger("app")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Read a sportsbook bet slip screenshot into JSON.")
    parser.add_argument("path", help="slip image, or an OCR text dump (.txt)")
    parser.add_argument("--text", action="store_true", help="treat the path as OCR text even without .txt")
    parser.add_argument("--stake", help="recompute the payout for this stake (whole units)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    logging.basicConfig(level=config.log_level, format=config.log_format)

    path = Path(args.path)
    try:
        if args.text or path.suffix.lower() == ".txt":
            bet = parse_slip_text(path.read_text(encoding="utf-8", errors="replace"))
        else:
            bet = parse_slip_image(path.read_bytes(), config)
    except Exception as e:
        logger.exception(f"Failed to read {path}: {e}")
        print("Failed to read bet slip.", file=sys.stderr)
        return 1

    print(bet.to_json())

    if args.stake is not None:
        stake = sanitize_stake_input(args.stake)
        calculator = PayoutCalculator(bet)
        value = calculator.calculate(stake) if stake is not None else None
        if value is None:
            logger.warning(f"Cannot recompute payout for stake {args.stake!r} (slip stake: {bet.stake}).")
        else:
            print(f"Payout: {format_currency(value)}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
