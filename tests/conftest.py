import pytest

FANDUEL_SLIP = """
32 BMA
My Bets
Settled
Same Game Parlay +612
Same Game Parlay +612
Real Madrid v Liverpool 3:45PM ET

Kylian Mbappe
Kylian Mbappe
Kylian Mbappe
ANYTIME GOALSCORER
Mohamed Salah
TO BE BOOKED
BET ID: O/0242888/0000154 PLACED: 05/01/2024 7:12PM ET
$10.00 $61.20
Wager Payout
"""


@pytest.fixture
def fanduel_slip():
    return FANDUEL_SLIP
