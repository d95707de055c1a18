"""Tests for greedy squad generation (SquadGenerationMixin.select_squad)."""

from collections import Counter

import pytest

from fpl_squad_picker.domain.models.player import PlayerDomain, Position
from fpl_squad_picker.domain.models.squad import Strategy
from fpl_squad_picker.domain.services.optimization_service import OptimizationService

TEAMS = ["ARS", "LIV", "MCI", "CHE", "TOT", "NEW", "AVL", "BHA"]


def make_player(player_id, position, price=5.0, projected=10.0, team="ARS"):
    return PlayerDomain(
        player_id=player_id,
        web_name=f"Player{player_id}",
        team=team,
        position=position,
        price=price,
        fixture_difficulty="MEDIUM",
        projected_points=projected,
    )


@pytest.fixture
def service():
    return OptimizationService()


@pytest.fixture
def large_catalog():
    """40 players, 10 per position, spread over 8 clubs."""
    players = []
    player_id = 1
    for position in Position:
        for i in range(10):
            players.append(
                make_player(
                    player_id,
                    position,
                    price=4.0 + i * 0.5,
                    projected=10.0 + i * 3,
                    team=TEAMS[player_id % len(TEAMS)],
                )
            )
            player_id += 1
    return players


class TestSelectSquad:
    def test_full_squad_respects_caps(self, service, large_catalog):
        squad = service.select_squad(large_catalog, 1000.0, Strategy.BALANCED)

        assert len(squad) == 15
        positions = Counter(p.position for p in squad)
        assert positions == {
            Position.GKP: 2,
            Position.DEF: 5,
            Position.MID: 5,
            Position.FWD: 3,
        }
        assert max(Counter(p.team for p in squad).values()) <= 3
        assert len({p.player_id for p in squad}) == 15

    def test_position_cap_skips_extra_goalkeepers(self, service):
        goalkeepers = [make_player(i, Position.GKP, projected=100.0, team=TEAMS[i]) for i in range(1, 5)]
        defender = make_player(10, Position.DEF, projected=1.0, team="BHA")

        squad = service.select_squad(goalkeepers + [defender], 100.0, Strategy.BALANCED)

        assert [p.player_id for p in squad] == [1, 2, 10]

    def test_club_cap(self, service):
        arsenal = [make_player(i, Position.MID, projected=50.0 - i, team="ARS") for i in range(1, 6)]
        other = make_player(20, Position.MID, projected=1.0, team="LIV")

        squad = service.select_squad(arsenal + [other], 100.0, Strategy.BALANCED)

        assert [p.player_id for p in squad] == [1, 2, 3, 20]

    def test_unaffordable_player_skipped_not_stopping(self, service):
        star = make_player(1, Position.FWD, price=15.0, projected=90.0)
        cheap = make_player(2, Position.FWD, price=4.5, projected=20.0, team="LIV")

        squad = service.select_squad([star, cheap], 10.0, Strategy.AGGRESSIVE)

        assert squad == [cheap]

    def test_budget_tolerance_absorbs_float_drift(self, service):
        players = [
            make_player(1, Position.DEF, price=0.1, projected=3.0),
            make_player(2, Position.DEF, price=0.2, projected=2.0, team="LIV"),
        ]

        squad = service.select_squad(players, 0.3, Strategy.BALANCED)

        assert len(squad) == 2

    def test_never_exceeds_budget(self, service, large_catalog):
        for budget in (20.0, 55.5, 83.0):
            for strategy in Strategy:
                squad = service.select_squad(large_catalog, budget, strategy)
                assert sum(p.price for p in squad) <= budget + 1e-9

    def test_short_squad_when_budget_too_small(self, service, large_catalog):
        squad = service.select_squad(large_catalog, 9.0, Strategy.BALANCED)

        assert 0 < len(squad) < 15
        assert sum(p.price for p in squad) <= 9.0

    def test_admission_order_follows_ranking(self, service, large_catalog):
        squad = service.select_squad(large_catalog, 1000.0, Strategy.BALANCED)
        scores = [service.score_player(p, Strategy.BALANCED) for p in squad]

        assert scores == sorted(scores, reverse=True)
