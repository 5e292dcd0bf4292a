import logging
import re
from typing import Optional

from models.bet import ParsedBet

logger = logging.getLogger("payout")

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")
_LEADING_NUMBER_RE = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_STAKE_INPUT_RE = re.compile(r"[0-9]*")


def _leading_number(text: str) -> Optional[float]:
    m = _LEADING_NUMBER_RE.match(text or "")
    return float(m.group(0)) if m else None


def parse_amount(text: str) -> Optional[float]:
    """Numeric value of a currency string such as "$61.20"; None if it has none."""
    return _leading_number(_NON_NUMERIC_RE.sub("", text or ""))


def sanitize_stake_input(text: str) -> Optional[str]:
    # Leading zeros are dropped; anything but digits is rejected.
    value = (text or "").lstrip("0")
    return value if _STAKE_INPUT_RE.fullmatch(value) else None


def recompute_payout(stake: str, payout: str, custom_stake: str) -> Optional[float]:
    """Scale the slip's payout linearly to a hypothetical stake."""
    original_stake = parse_amount(stake)
    original_payout = parse_amount(payout)
    new_stake = _leading_number(custom_stake)
    if original_stake is None or original_stake <= 0 or original_payout is None:
        return None
    if new_stake is None or new_stake <= 0:
        return None
    return (new_stake / original_stake) * original_payout


def format_currency(value: float) -> str:
    return f"${value:.2f}"


class PayoutCalculator:
    """Keeps the last recomputed payout for one parsed slip."""

    def __init__(self, bet: ParsedBet):
        self.bet = bet
        self.calculated_payout: Optional[float] = None

    def calculate(self, custom_stake: str) -> Optional[float]:
        value = recompute_payout(self.bet.stake, self.bet.payout, custom_stake)
        if value is None:
            logger.debug(f"Ignoring custom stake {custom_stake!r} for stake={self.bet.stake} payout={self.bet.payout}")
        else:
            self.calculated_payout = value
        return self.calculated_payout
