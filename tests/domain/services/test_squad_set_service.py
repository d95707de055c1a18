"""Tests for SquadSetService - the three-strategy recommendation entry point.

Covers the end-to-end squad properties (caps, budget, XI/bench partition,
captaincy), determinism and the degraded and invalid-input paths.
"""

from collections import Counter
from unittest.mock import patch

import pytest

from fpl_squad_picker.domain.common.exceptions import SquadInputError
from fpl_squad_picker.domain.common.result import ErrorType
from fpl_squad_picker.domain.models.player import PlayerDomain, Position
from fpl_squad_picker.domain.models.squad import SquadDomain, Strategy
from fpl_squad_picker.domain.services.optimization.optimization_base import (
    FORMATIONS,
    MAX_PLAYERS_PER_TEAM,
    POSITION_CAPS,
)
from fpl_squad_picker.domain.services.squad_set_service import (
    SquadSetService,
    build_all_squads,
)

TEAMS = ["ARS", "AVL", "BOU", "BRE", "BHA", "CHE", "CRY", "EVE", "FUL", "LIV"]
FIXTURES = ["EASY", "MEDIUM", "HARD"]
LEGAL_SHAPES = {formation.name for formation in FORMATIONS}


def make_player(player_id, position, price, projected, team, form=0.0, ppm=0.0, fixture="MEDIUM", yellow_cards=0):
    return PlayerDomain(
        player_id=player_id,
        web_name=f"Player{player_id}",
        team=team,
        position=position,
        price=price,
        points_per_million=ppm,
        form=form,
        fixture_difficulty=fixture,
        projected_points=projected,
        yellow_cards=yellow_cards,
    )


@pytest.fixture
def catalog_50():
    """50 players: 6 GKP, 16 DEF, 16 MID, 12 FWD with varied signals."""
    layout = [(Position.GKP, 6), (Position.DEF, 16), (Position.MID, 16), (Position.FWD, 12)]
    players = []
    player_id = 1
    for position, count in layout:
        for i in range(count):
            price = 4.0 + (i * 7 % 10) * 0.9
            projected = 15.0 + (i * 13 % 17) * 3.5
            players.append(
                make_player(
                    player_id,
                    position,
                    price=round(price, 1),
                    projected=projected,
                    team=TEAMS[(player_id * 3) % len(TEAMS)],
                    form=(i * 5 % 9) * 0.8,
                    ppm=round(projected / price, 2),
                    fixture=FIXTURES[player_id % 3],
                    yellow_cards=i % 6,
                )
            )
            player_id += 1
    return players


def assert_squad_invariants(squad: SquadDomain, budget: float):
    selected = squad.selected
    assert len(selected) <= 15
    for position, count in Counter(p.position for p in selected).items():
        assert count <= POSITION_CAPS[position]
    assert max(Counter(p.team for p in selected).values()) <= MAX_PLAYERS_PER_TEAM
    assert sum(p.price for p in selected) <= budget + 1e-9

    starting_ids = [p.player_id for p in squad.starting]
    bench_ids = [p.player_id for p in squad.bench]
    assert sorted(starting_ids + bench_ids) == sorted(p.player_id for p in selected)
    assert sum(1 for p in squad.starting if p.is_goalkeeper) <= 1

    goalkeepers_benched = [p.is_goalkeeper for p in squad.bench]
    assert goalkeepers_benched == sorted(goalkeepers_benched)

    if squad.starting:
        assert squad.captain.player_id in starting_ids
        others = [p for p in squad.starting if p.player_id != squad.captain.player_id]
        if others:
            assert squad.vice_captain.player_id != squad.captain.player_id
            assert squad.captain.projected_points >= squad.vice_captain.projected_points
            assert all(
                squad.vice_captain.projected_points >= p.projected_points
                for p in others
                if p.player_id != squad.vice_captain.player_id
            )


class TestBuildAllSquads:
    def test_returns_one_squad_per_strategy(self, catalog_50):
        squads = build_all_squads(catalog_50, 100.0)

        assert list(squads) == [Strategy.BALANCED, Strategy.VALUE, Strategy.AGGRESSIVE]
        for strategy, squad in squads.items():
            assert squad.strategy == strategy
            assert squad.budget == 100.0

    def test_every_strategy_satisfies_constraints(self, catalog_50):
        squads = SquadSetService().build_all_squads(catalog_50, 100.0)

        for squad in squads.values():
            assert_squad_invariants(squad, 100.0)

    @pytest.mark.parametrize("budget", [45.0, 60.0, 82.5, 100.0, 1000.0])
    def test_constraints_hold_across_budgets(self, catalog_50, budget):
        for squad in build_all_squads(catalog_50, budget).values():
            assert_squad_invariants(squad, budget)

    def test_generous_budget_fills_squad_with_legal_formation(self, catalog_50):
        for squad in build_all_squads(catalog_50, 1000.0).values():
            assert squad.is_complete
            assert len(squad.starting) == 11
            assert len(squad.bench) == 4
            assert squad.used_fallback_formation is False
            assert squad.formation in LEGAL_SHAPES
            assert squad.goalkeeper is not None
            assert squad.bench[-1].is_goalkeeper

    def test_strategies_rank_differently(self, catalog_50):
        squads = build_all_squads(catalog_50, 1000.0)

        selections = {
            strategy: [p.player_id for p in squad.selected]
            for strategy, squad in squads.items()
        }
        assert len({tuple(ids) for ids in selections.values()}) > 1

    def test_deterministic(self, catalog_50):
        first = build_all_squads(catalog_50, 100.0)
        second = build_all_squads(catalog_50, 100.0)

        for strategy in Strategy:
            assert first[strategy].model_dump() == second[strategy].model_dump()

    def test_no_state_carried_between_budgets(self, catalog_50):
        service = SquadSetService()
        before = service.build_all_squads(catalog_50, 100.0)
        service.build_all_squads(catalog_50, 50.0)
        after = service.build_all_squads(catalog_50, 100.0)

        for strategy in Strategy:
            assert before[strategy] == after[strategy]

    def test_catalog_not_mutated(self, catalog_50):
        snapshot = list(catalog_50)
        build_all_squads(catalog_50, 100.0)
        assert catalog_50 == snapshot

    def test_single_affordable_goalkeeper(self):
        goalkeepers = [
            make_player(i, Position.GKP, price=4.0, projected=10.0, team=TEAMS[i % len(TEAMS)])
            for i in range(1, 21)
        ]

        squads = build_all_squads(goalkeepers, 4.0)
        squad = squads[Strategy.VALUE]

        assert len(squad.selected) == 1
        assert squad.selected[0].player_id == 1
        assert squad.starting == squad.selected
        assert squad.bench == ()
        assert squad.captain.player_id == 1
        assert squad.vice_captain is None
        assert squad.used_fallback_formation is True
        assert squad.is_complete is False

    def test_tight_budget_returns_short_squad(self, catalog_50):
        squads = build_all_squads(catalog_50, 20.0)

        for squad in squads.values():
            assert 0 < len(squad.selected) < 15
            assert_squad_invariants(squad, 20.0)


class TestInvalidInput:
    def test_empty_catalog(self):
        with pytest.raises(SquadInputError, match="empty") as exc_info:
            build_all_squads([], 100.0)
        assert exc_info.value.invariant == "catalog_not_empty"

    def test_none_catalog(self):
        with pytest.raises(SquadInputError):
            build_all_squads(None, 100.0)

    @pytest.mark.parametrize("budget", [0, -5.0, float("nan"), float("inf"), "lots"])
    def test_invalid_budget(self, catalog_50, budget):
        with pytest.raises(SquadInputError) as exc_info:
            build_all_squads(catalog_50, budget)
        assert exc_info.value.invariant == "budget_positive"

    def test_duplicate_player_ids(self, catalog_50):
        with pytest.raises(SquadInputError) as exc_info:
            build_all_squads(catalog_50 + [catalog_50[0]], 100.0)
        assert exc_info.value.invariant == "player_id_unique"

    def test_non_player_entry(self, catalog_50):
        with pytest.raises(SquadInputError) as exc_info:
            build_all_squads(catalog_50 + [{"player_id": 999}], 100.0)
        assert exc_info.value.invariant == "catalog_entry_type"

    def test_unvalidated_player_with_bad_price(self, catalog_50):
        broken = PlayerDomain.model_construct(
            **{**catalog_50[0].model_dump(), "player_id": 999, "price": 0.0}
        )
        with pytest.raises(SquadInputError) as exc_info:
            build_all_squads(catalog_50 + [broken], 100.0)
        assert exc_info.value.invariant == "player_price_positive"

    @pytest.mark.parametrize(
        "field", ["projected_points", "form", "points_per_million"]
    )
    def test_unvalidated_player_with_nan_signal(self, catalog_50, field):
        broken = PlayerDomain.model_construct(
            **{**catalog_50[0].model_dump(), "player_id": 999, field: float("nan")}
        )
        with pytest.raises(SquadInputError, match="non-finite") as exc_info:
            build_all_squads(catalog_50 + [broken], 100.0)
        assert exc_info.value.invariant == "player_signals_finite"


class TestRecommend:
    def test_success_result(self, catalog_50):
        result = SquadSetService().recommend(catalog_50, 100.0)

        assert result.is_success
        assert set(result.value) == set(Strategy)

    def test_invalid_input_becomes_validation_error(self):
        result = SquadSetService().recommend([], 100.0)

        assert result.is_failure
        assert result.error.error_type == ErrorType.VALIDATION_ERROR
        assert "catalog_not_empty" in result.error.field_errors

    def test_uses_injected_optimization_service(self, catalog_50):
        service = SquadSetService()
        with patch.object(
            service.optimization_service,
            "build_squad",
            wraps=service.optimization_service.build_squad,
        ) as build_squad:
            service.recommend(catalog_50, 100.0)

        assert build_squad.call_count == 3
        assert [c.args[2] for c in build_squad.call_args_list] == list(Strategy)
