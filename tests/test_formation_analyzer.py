"""Tests for formation quality analysis."""
import copy
import logging

import pytest

from false_nine.config import Settings
from false_nine.models import FitnessBand
from false_nine.services.auto_assignment_service import AutoAssignmentService
from false_nine.services.formation_analyzer import FormationAnalyzer


@pytest.fixture
def analyzer():
    return FormationAnalyzer()


@pytest.fixture
def full_lineup(lineup, occupy):
    """Every slot filled, injured midfielder at centre back."""
    return occupy(lineup, {"cb-2-slot": "injured-1"})


def _position(result, slot_id):
    return next((p for p in result.position_scores if p.slot_id == slot_id), None)


# ======================================================================
# Scores
# ======================================================================


def test_analysis_covers_occupied_slots(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)

    assert len(result.position_scores) == 5
    assert result.total_score > 0
    assert result.average_score > 0


def test_fitness_bands_for_matching_roles(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)

    keeper = _position(result, "gk-slot")
    defender = _position(result, "cb-1-slot")
    assert keeper.fitness == FitnessBand.EXCELLENT
    assert keeper.score >= 90
    assert defender.fitness == FitnessBand.EXCELLENT
    assert defender.player_name == "Virgil van Dijk"
    assert _position(result, "cb-2-slot").fitness == FitnessBand.POOR


def test_average_is_rounded_mean(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)

    scores = [p.score for p in result.position_scores]
    assert result.total_score == sum(scores)
    assert result.average_score == round(sum(scores) / len(scores))


def test_position_details(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)

    keeper = _position(result, "gk-slot")
    injured = _position(result, "cb-2-slot")
    assert keeper.position_familiarity == 100
    assert keeper.chemistry_score == 95
    assert injured.position_familiarity == 50
    assert injured.role == "DF"


# ======================================================================
# Recommendations
# ======================================================================


def test_flags_unavailable_player(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)

    injured = [r for r in result.recommendations if "Injured Player" in r.issue]
    assert any("Major Injury" in r.issue for r in injured)
    assert any("not well-suited" in r.issue for r in injured)
    assert all(r.slot_id == "cb-2-slot" for r in injured)


def test_flags_empty_slot(analyzer, players, lineup):
    result = analyzer.analyze(lineup, players)

    empty = [r for r in result.recommendations if r.slot_id == "cb-2-slot"]
    assert len(empty) == 1
    assert "No player assigned" in empty[0].issue
    assert empty[0].priority == "high"


def test_good_lineup_has_no_recommendations(analyzer, players, lineup, formation):
    four = formation.with_slots([s for s in lineup.slots if s.player_id])

    result = analyzer.analyze(four, players)

    assert result.recommendations == []


def test_unknown_occupant_is_flagged_not_scored(analyzer, players, lineup, occupy):
    formation = occupy(lineup, {"cb-2-slot": "transferred-out"})

    result = analyzer.analyze(formation, players)

    assert _position(result, "cb-2-slot") is None
    assert any("not in the roster" in r.issue for r in result.recommendations)


def test_poor_fit_priority_and_ordering(analyzer, players, formation, occupy):
    """Midfielder in goal (low), striker at centre back (medium), empty midfield (high)."""
    lineup = occupy(formation, {"gk-slot": "cm-1", "cb-1-slot": "fw-1"})
    lineup = lineup.with_slots([lineup.get_slot(sid) for sid in ("gk-slot", "cb-1-slot", "cm-slot")])

    result = analyzer.analyze(lineup, players)

    assert [(r.slot_id, r.priority) for r in result.recommendations] == [
        ("cm-slot", "high"),
        ("cb-1-slot", "medium"),
        ("gk-slot", "low"),
    ]
    assert result.recommendations[2].score == _position(result, "gk-slot").score


# ======================================================================
# Empty input
# ======================================================================


def test_empty_assignment(analyzer, players, lineup):
    empty = AutoAssignmentService().assign([], lineup, "home")

    result = analyzer.analyze(empty, players)

    assert result.total_score == 0
    assert result.average_score == 0
    assert result.position_scores == []
    assert len(result.recommendations) == 5
    assert all("No player assigned" in r.issue for r in result.recommendations)


def test_empty_formation(analyzer, players, formation):
    result = analyzer.analyze(formation.with_slots([]), players)

    assert result.total_score == 0
    assert result.average_score == 0
    assert result.recommendations == []


# ======================================================================
# Metrics, purity, serialization
# ======================================================================


def test_formation_metrics(analyzer, players, full_lineup):
    result = analyzer.analyze(full_lineup, players)
    metrics = result.formation_metrics

    df_scores = [_position(result, s).score for s in ("cb-1-slot", "cb-2-slot")]
    assert metrics.defensive_strength == pytest.approx(sum(df_scores) / 2, abs=0.05)
    assert metrics.midfield_control == _position(result, "cm-slot").score
    assert metrics.attacking_threat == _position(result, "fw-slot").score
    assert metrics.overall_balance == pytest.approx(result.total_score / 5, abs=0.05)
    assert 0 < metrics.chemistry_rating <= 100


def test_missing_line_has_zero_strength(analyzer, players, lineup, formation):
    no_forwards = formation.with_slots([s for s in lineup.slots if s.role != "FW"])

    result = analyzer.analyze(no_forwards, players)

    assert result.formation_metrics.attacking_threat == 0


def test_inputs_are_not_mutated(analyzer, players, full_lineup):
    players_before = copy.deepcopy(players)
    formation_before = copy.deepcopy(full_lineup)

    analyzer.analyze(full_lineup, players)

    assert players == players_before
    assert full_lineup == formation_before


def test_to_dict_uses_plain_values(analyzer, players, full_lineup):
    data = analyzer.analyze(full_lineup, players).to_dict()

    assert data["position_scores"][0]["fitness"] == "excellent"
    assert type(data["position_scores"][0]["fitness"]) is str
    assert set(data["formation_metrics"]) == {
        "defensive_strength",
        "midfield_control",
        "attacking_threat",
        "overall_balance",
        "chemistry_rating",
    }


def test_slow_analysis_logs_warning(players, full_lineup, caplog):
    analyzer = FormationAnalyzer(settings=Settings(slow_analysis_ms=-1))

    with caplog.at_level(logging.WARNING, logger="false_nine"):
        analyzer.analyze(full_lineup, players)

    assert "Slow formation analysis" in caplog.text
