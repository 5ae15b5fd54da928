"""
Shared fixtures for the tournament simulator tests.
"""

import random
from typing import Iterable, List

import pytest

from tournament_sim.sources import parse_groups_document, parse_exhibitions_document


GROUPS_DOCUMENT = {
    "A": [
        {"Team": "Canada", "ISOCode": "CAN", "FIBARanking": 7},
        {"Team": "Australia", "ISOCode": "AUS", "FIBARanking": 5},
        {"Team": "Greece", "ISOCode": "GRE", "FIBARanking": 14},
        {"Team": "Spain", "ISOCode": "ESP", "FIBARanking": 2},
    ],
    "B": [
        {"Team": "Germany", "ISOCode": "GER", "FIBARanking": 3},
        {"Team": "France", "ISOCode": "FRA", "FIBARanking": 9},
        {"Team": "Brazil", "ISOCode": "BRA", "FIBARanking": 12},
        {"Team": "Japan", "ISOCode": "JPN", "FIBARanking": 26},
    ],
    "C": [
        {"Team": "United States", "ISOCode": "USA", "FIBARanking": 1},
        {"Team": "Serbia", "ISOCode": "SRB", "FIBARanking": 4},
        {"Team": "South Sudan", "ISOCode": "SSD", "FIBARanking": 34},
        {"Team": "Puerto Rico", "ISOCode": "PRI", "FIBARanking": 16},
    ],
}

EXHIBITIONS_DOCUMENT = {
    "CAN": [
        {"Date": "06/07/24", "Opponent": "GER", "Result": "92-88"},
        {"Date": "12/07/24", "Opponent": "FRA", "Result": "85-79"},
    ],
    "GER": [
        {"Date": "06/07/24", "Opponent": "CAN", "Result": "88-92"},
        {"Date": "19/07/24", "Opponent": "JPN", "Result": "104-83"},
    ],
    "USA": [
        {"Date": "10/07/24", "Opponent": "SRB", "Result": "105-79"},
        {"Date": "20/07/24", "Opponent": "SSD", "Result": "101-100"},
    ],
    "SRB": [
        {"Date": "10/07/24", "Opponent": "USA", "Result": "79-105"},
        {"Date": "17/07/24", "Opponent": "PRI", "Result": "107-66"},
    ],
    "ESP": [
        {"Date": "14/07/24", "Opponent": "PRI", "Result": "89-74"},
    ],
}


class ScriptedRandom(random.Random):
    """Random source that replays scripted random() values and never reorders shuffles."""

    def __init__(self, values: Iterable[float], default: float = 0.5):
        super().__init__(0)
        self.values: List[float] = list(values)
        self.default = default

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.default

    def shuffle(self, x, *args, **kwargs) -> None:
        return None


@pytest.fixture
def groups_document():
    return {label: [dict(t) for t in teams] for label, teams in GROUPS_DOCUMENT.items()}


@pytest.fixture
def exhibitions_document():
    return {code: [dict(m) for m in matches] for code, matches in EXHIBITIONS_DOCUMENT.items()}


@pytest.fixture
def groups(groups_document):
    return parse_groups_document(groups_document)


@pytest.fixture
def exhibitions(exhibitions_document):
    return parse_exhibitions_document(exhibitions_document)


@pytest.fixture
def scripted_rng():
    """Factory for a ScriptedRandom with the given values."""
    def make(*values, default: float = 0.5):
        return ScriptedRandom(values, default=default)
    return make
