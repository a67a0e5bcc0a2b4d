"""
Pytest tests for ranking resolution: filtering, name precedence and ordering.
"""

import pytest
from pydantic import ValidationError

from power_report.models.rankings import PowerRankingEntry, ResolvedRanking
from power_report.normalization.rankings import (
    NoRankedTeamsError,
    resolve_ranking,
    resolve_rankings,
    top_rankings,
)


def entry(**fields) -> PowerRankingEntry:
    return PowerRankingEntry(**fields)


class TestResolveRanking:
    @pytest.mark.parametrize(
        "fields",
        [
            {"team_id": 1, "team_name": "Celtics"},
            {"current_week_rank": 1, "team_name": "Celtics"},
            {"team_id": 1, "current_week_rank": 1},
            {},
        ],
    )
    def test_incomplete_entries_are_dropped(self, fields):
        assert resolve_ranking(entry(**fields)) is None

    def test_name_wins_over_nickname_and_display_name(self):
        resolved = resolve_ranking(
            entry(
                team_id=1,
                current_week_rank=3,
                team_name="A",
                team_nickname="B",
                team_display_name="C",
            )
        )
        assert resolved == ResolvedRanking(team_id=1, team_name="A", rank=3)

    def test_nickname_when_name_missing(self):
        resolved = resolve_ranking(
            entry(team_id=1, current_week_rank=3, team_nickname="B", team_display_name="C")
        )
        assert resolved.team_name == "B"

    def test_display_name_last(self):
        resolved = resolve_ranking(
            entry(team_id=1, current_week_rank=3, team_display_name="C")
        )
        assert resolved.team_name == "C"

    def test_parses_aliases(self):
        raw = PowerRankingEntry.model_validate(
            {"teamId": 7, "teamNickname": "Thunder", "currentWeekRank": 2}
        )
        assert resolve_ranking(raw) == ResolvedRanking(
            team_id=7, team_name="Thunder", rank=2
        )

    @pytest.mark.parametrize(
        "raw",
        [
            '{"teamId": "1610612738", "currentWeekRank": 1, "teamName": "Celtics"}',
            '{"teamId": 1610612738, "currentWeekRank": "1", "teamName": "Celtics"}',
            '{"teamId": 1610612738, "currentWeekRank": 1.5, "teamName": "Celtics"}',
        ],
    )
    def test_numeric_fields_are_not_coerced(self, raw):
        with pytest.raises(ValidationError):
            PowerRankingEntry.model_validate_json(raw)


class TestResolveRankings:
    def test_sorted_ascending_by_rank(self):
        resolved = resolve_rankings(
            [
                entry(team_id=30, current_week_rank=3, team_name="Bucks"),
                entry(team_id=10, current_week_rank=1, team_name="Celtics"),
                entry(team_id=20, current_week_rank=2, team_name="Nuggets"),
            ]
        )
        assert [r.rank for r in resolved] == [1, 2, 3]
        assert [r.team_id for r in resolved] == [10, 20, 30]

    def test_equal_ranks_keep_article_order(self):
        resolved = resolve_rankings(
            [
                entry(team_id=5, current_week_rank=2, team_name="Second-a"),
                entry(team_id=6, current_week_rank=1, team_name="First"),
                entry(team_id=7, current_week_rank=2, team_name="Second-b"),
            ]
        )
        assert [r.team_name for r in resolved] == ["First", "Second-a", "Second-b"]

    def test_incomplete_entries_filtered_out(self):
        resolved = resolve_rankings(
            [
                entry(team_id=1, current_week_rank=1),
                entry(team_id=2, current_week_rank=2, team_name="Heat"),
                entry(current_week_rank=3, team_name="Knicks"),
            ]
        )
        assert resolved == [ResolvedRanking(team_id=2, team_name="Heat", rank=2)]

    @pytest.mark.parametrize(
        "entries", [[], [entry(team_id=1, team_name="No rank")]]
    )
    def test_no_survivors(self, entries):
        with pytest.raises(NoRankedTeamsError):
            resolve_rankings(entries)


def test_top_rankings_takes_first_four():
    rankings = [ResolvedRanking(team_id=i, team_name=f"T{i}", rank=i) for i in range(1, 8)]
    assert [r.rank for r in top_rankings(rankings)] == [1, 2, 3, 4]
    assert top_rankings(rankings[:2]) == rankings[:2]
