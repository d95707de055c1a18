"""
Squad export and display helpers for the presentation layer.

Renders a recommended squad as the shareable text block (clipboard / .txt
download) and as a pandas table for terminal display.
"""

from typing import Optional

import pandas as pd

from fpl_squad_picker.config import config
from fpl_squad_picker.domain.models.player import PlayerDomain
from fpl_squad_picker.domain.models.squad import SquadDomain

RULE = "━" * 24


def _points(value: float) -> str:
    """Whole numbers without a trailing .0, otherwise one decimal."""
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def _name_and_team(player: Optional[PlayerDomain]) -> str:
    if player is None:
        return "-"
    return f"{player.web_name} ({player.team})"


def export_filename(set_number: int, gameweek: int) -> str:
    """File name for a downloaded squad, e.g. FPL-Team-Set1-GW23.txt."""
    return f"FPL-Team-Set{set_number}-GW{gameweek}.txt"


def render_squad_export(
    squad: SquadDomain,
    gameweek: Optional[int] = None,
    horizon_gameweeks: Optional[int] = None,
) -> str:
    """Render a squad as the plain-text export block.

    Args:
        squad: Recommended squad
        gameweek: Target gameweek shown in the header (omitted when None)
        horizon_gameweeks: Gameweeks covered by projected points
            (defaults to the configured planning horizon)

    Returns:
        Multi-line text with captaincy, XI by position, bench and summary
    """
    if horizon_gameweeks is None:
        horizon_gameweeks = config.recommendation.planning_horizon_gameweeks
    strategy = squad.strategy

    lines = [
        f"🏆 FPL Team - Set {strategy.set_number}: {strategy.label}",
        strategy.description,
    ]
    if gameweek is not None:
        lines.append(f"Gameweek: {gameweek}")
    lines += [
        "",
        f"👑 CAPTAIN: {_name_and_team(squad.captain)}",
        f"⭐ VICE: {_name_and_team(squad.vice_captain)}",
        "",
        RULE,
        f"STARTING XI ({squad.formation}):" if squad.formation else "STARTING XI:",
        RULE,
        "",
    ]

    for position, players in squad.starting_by_position().items():
        if not players:
            continue
        lines.append(f"{position.value}:")
        for p in players:
            lines.append(
                f"  • {p.web_name} ({p.team}) - £{p.price:.1f}M | "
                f"Pred: {_points(p.projected_points)}pts"
            )
        lines.append("")

    lines += [RULE, "BENCH:", RULE]
    for i, p in enumerate(squad.bench, start=1):
        lines.append(
            f"{i}. {p.web_name} ({p.team}) - {p.position.value} - £{p.price:.1f}M"
        )

    lines += [
        "",
        RULE,
        "SUMMARY:",
        RULE,
        f"Total Cost: £{squad.total_cost:.1f}M",
        f"Budget Left: £{squad.budget_remaining:.1f}M",
        f"Expected Points ({horizon_gameweeks}GW): "
        f"{_points(squad.total_projected_points)}pts",
        f"Yellow Card Warnings: {squad.disciplinary_risk_count}",
    ]
    return "\n".join(lines) + "\n"


def squad_to_dataframe(squad: SquadDomain) -> pd.DataFrame:
    """Starting XI followed by the bench as a display table.

    The ``role`` column marks C / VC, other starters as XI, and bench
    players by priority (B1 ... B4).
    """
    captain_id = squad.captain.player_id if squad.captain else None
    vice_id = squad.vice_captain.player_id if squad.vice_captain else None

    rows = []
    for p in squad.starting:
        role = "C" if p.player_id == captain_id else "VC" if p.player_id == vice_id else "XI"
        rows.append({"role": role, **_player_row(p)})
    for i, p in enumerate(squad.bench, start=1):
        rows.append({"role": f"B{i}", **_player_row(p)})

    columns = [
        "role",
        "name",
        "team",
        "position",
        "price",
        "projected_points",
        "form",
        "fixture",
        "yellow_cards",
    ]
    return pd.DataFrame(rows, columns=columns)


def _player_row(player: PlayerDomain) -> dict:
    return {
        "name": player.web_name,
        "team": player.team,
        "position": player.position.value,
        "price": round(player.price, 1),
        "projected_points": round(player.projected_points, 2),
        "form": round(player.form, 2),
        "fixture": player.fixture_difficulty.value.capitalize(),
        "yellow_cards": player.yellow_cards,
    }
