import logging
import re
from typing import List, Optional, Tuple

from format_router import filter_noise, route_text
from models.bet import NOT_FOUND, UNKNOWN_TIME, BetLeg, ParsedBet

logger = logging.getLogger("parsing")

TYPE_LINE_RE = re.compile(r"same game parlay", re.I)
ODDS_RE = re.compile(r"\+[0-9]+")
GAME_LINE_RE = re.compile(r" v ", re.I)
START_TIME_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}(?:AM|PM)?(?: ET)?")
MONEY_RE = re.compile(r"\$[0-9.]+")
WAGER_RE = re.compile(r"wager", re.I)
PAYOUT_RE = re.compile(r"payout", re.I)
META_LINE_RE = re.compile(r"BET ID:.*PLACED:", re.I)
BET_ID_RE = re.compile(r"BET ID:\s*(\S+)", re.I)
PLACED_RE = re.compile(r"PLACED:\s*(.+)$", re.I)
LEADING_NUMBER_RE = re.compile(r"^[0-9]+\s*")
PLAYER_RE = re.compile(r"[A-Z][a-z]+(?: [A-Z][a-z]+)*")
ACTION_RE = re.compile(r"[A-Z]{3,}|[A-Z][a-z]+ [A-Z]+")


def _first_matching(lines: List[str], pattern: re.Pattern) -> Optional[str]:
    return next((line for line in lines if pattern.search(line)), None)


def _split_out(line: str, pattern: re.Pattern) -> Tuple[Optional[str], str]:
    # First match of pattern, and the line with that match removed.
    m = pattern.search(line)
    if not m:
        return None, line.strip()
    return m.group(0), (line[:m.start()] + line[m.end():]).strip()


def _extract_type_and_odds(lines: List[str]) -> Tuple[Optional[str], str, str]:
    type_line = _first_matching(lines, TYPE_LINE_RE)
    if type_line is None:
        return None, "", NOT_FOUND
    odds, bet_type = _split_out(type_line, ODDS_RE)
    return type_line, bet_type, odds or NOT_FOUND


def _extract_game_and_time(lines: List[str]) -> Tuple[Optional[str], str, str]:
    game_line = _first_matching(lines, GAME_LINE_RE)
    if game_line is None:
        return None, "", UNKNOWN_TIME
    start_time, game = _split_out(game_line, START_TIME_RE)
    return game_line, game, start_time or UNKNOWN_TIME


def consumed_lines(lines: List[str]) -> Tuple[Optional[str], Optional[str]]:
    """The type line and game line, which the noise filter drops before the other passes."""
    return _first_matching(lines, TYPE_LINE_RE), _first_matching(lines, GAME_LINE_RE)


def _extract_stake_and_payout(lines: List[str]) -> Tuple[str, str]:
    """Dollar amounts sitting directly above a "Wager ... Payout" label row."""
    for money_line, label_line in zip(lines, lines[1:]):
        if not MONEY_RE.search(money_line):
            continue
        if not (WAGER_RE.search(label_line) and PAYOUT_RE.search(label_line)):
            continue
        amounts = MONEY_RE.findall(money_line)
        if len(amounts) == 2:
            return amounts[0], amounts[1]
    return NOT_FOUND, NOT_FOUND


def _extract_metadata(lines: List[str]) -> Tuple[str, str]:
    meta_line = _first_matching(lines, META_LINE_RE)
    if meta_line is None:
        return NOT_FOUND, NOT_FOUND
    bet_id = BET_ID_RE.search(meta_line)
    placed = PLACED_RE.search(meta_line)
    return (
        (bet_id.group(1).strip() if bet_id else "") or NOT_FOUND,
        (placed.group(1).strip() if placed else "") or NOT_FOUND,
    )


def _extract_legs(lines: List[str]) -> List[BetLeg]:
    """
    Pair each line with the next one as (player, action).

    The window slides by one line, so overlapping pairs are all tested and an
    accepted action line may also be the player of the following pair.
    """
    legs: List[BetLeg] = []
    for player_line, action_line in zip(lines, lines[1:]):
        player = LEADING_NUMBER_RE.sub("", player_line, count=1)
        if PLAYER_RE.fullmatch(player) and ACTION_RE.search(action_line):
            legs.append(BetLeg(player=player, action=action_line))
    return legs


def parse_bet_slip_text(text: str, log: Optional[logging.Logger] = None) -> ParsedBet:
    """
    Parse raw OCR text of a betting slip into a ParsedBet.

    Every field is optional: anything the heuristics cannot find keeps its
    default, so this never raises for string input.
    """
    log = log or logger
    lines = route_text(text)

    type_line, bet_type, odds = _extract_type_and_odds(lines)
    game_line, game, start_time = _extract_game_and_time(lines)

    cleaned = filter_noise(lines, consumed=(type_line, game_line))
    if log.isEnabledFor(logging.DEBUG):
        log.debug(f"Cleaned {len(lines)} -> {len(cleaned)} lines:\n" + "\n".join(cleaned))

    stake, payout = _extract_stake_and_payout(cleaned)
    bet_id, placed_at = _extract_metadata(cleaned)
    legs = _extract_legs(cleaned)

    bet = ParsedBet(
        type=bet_type,
        odds=odds,
        game=game,
        start_time=start_time,
        stake=stake,
        payout=payout,
        bet_id=bet_id,
        placed_at=placed_at,
        legs=legs,
    )
    if log.isEnabledFor(logging.DEBUG):
        log.debug("Parsed bet slip:\n" + bet.to_json())
    return bet
