"""
Pytest fixtures for tests.
"""

import pytest

from domain.models.player import Player
from services.team_generator_service import TeamGeneratorService


@pytest.fixture
def sample_players():
    """Create a small roster in admin-console order."""
    records = [
        {"id": "p1", "firstname": "Ada", "lastname": "Lovelace", "power": 90},
        {"id": "p2", "firstname": "Grace", "lastname": "Hopper", "power": 10},
        {"id": "p3", "firstname": "Alan", "lastname": "Turing", "power": 50},
        {"id": "p4", "firstname": "edsger", "lastname": "Dijkstra", "power": 50},
        {"id": "p5", "firstname": "Barbara", "lastname": "Liskov", "power": 75.5},
        {"id": "p6", "firstname": "Donald", "lastname": "Knuth", "power": 64},
    ]
    return [Player.from_record(record) for record in records]


@pytest.fixture
def team_generator(sample_players):
    """Create a team generator over the sample roster."""
    return TeamGeneratorService(sample_players)
