import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

NOT_FOUND = "N/A"
UNKNOWN_TIME = "Unknown"


@dataclass(frozen=True)
class BetLeg:
    player: str
    action: str


@dataclass(frozen=True)
class ParsedBet:
    type: str = ""
    odds: str = NOT_FOUND
    game: str = ""
    start_time: str = UNKNOWN_TIME
    stake: str = NOT_FOUND
    payout: str = NOT_FOUND
    bet_id: str = NOT_FOUND
    placed_at: str = NOT_FOUND
    legs: List[BetLeg] = field(default_factory=list)

    @property
    def has_metadata(self) -> bool:
        return self.bet_id != NOT_FOUND or self.placed_at != NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view using the exported document's camelCase keys."""
        return {
            "type": self.type,
            "odds": self.odds,
            "game": self.game,
            "startTime": self.start_time,
            "stake": self.stake,
            "payout": self.payout,
            "betId": self.bet_id,
            "placedAt": self.placed_at,
            "legs": [{"player": leg.player, "action": leg.action} for leg in self.legs],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
