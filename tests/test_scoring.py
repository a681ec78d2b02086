"""
Unit tests for analytics/scoring.py.
"""
import pytest

from analytics.chain import analyze_chain
from analytics.scoring import calculate_difficulty, format_year, format_year_range, score_rating, summarize_round
from conftest import make_figure


class TestFormatting:
    def test_bce(self):
        assert format_year(-44) == "44 BCE"

    def test_ce(self):
        assert format_year(1066) == "1066 CE"
        assert format_year(0) == "0 CE"

    def test_range(self):
        assert format_year_range(-100, -44) == "100 BCE – 44 BCE"


class TestDifficulty:
    @pytest.mark.parametrize("gap, expected", [(0, "easy"), (499, "easy"), (500, "medium"), (999, "medium"), (1000, "hard")])
    def test_gap_thresholds(self, gap, expected):
        assert calculate_difficulty(make_figure("A", 0, 50), make_figure("B", gap, gap + 50)) == expected

    def test_order_independent(self):
        a, b = make_figure("A", -300, -250), make_figure("B", 1500, 1560)
        assert calculate_difficulty(a, b) == calculate_difficulty(b, a) == "hard"


class TestScoreRating:
    @pytest.mark.parametrize("score, label", [(0, "excellent"), (3, "excellent"), (4, "good"), (6, "good"),
                                              (7, "fair"), (10, "fair"), (11, "poor")])
    def test_bands(self, score, label):
        assert score_rating(score) == label


class TestSummarizeRound:
    def test_complete_round(self):
        a, bridge, b = make_figure("A", 100, 150), make_figure("Bridge", 140, 400), make_figure("B", 380, 420)
        stray = make_figure("Stray", 2000, 2050)
        summary = summarize_round(analyze_chain(a, b, [a, bridge, stray, b]), figures_added=2)
        assert summary["is_complete"] is True
        assert summary["score"] == 1
        assert summary["rating"] == "excellent"
        assert summary["path"] == ["A", "Bridge", "B"]
        assert summary["unused_figures"] == 1
        assert summary["figures_added"] == 2

    def test_incomplete_round_has_no_score(self):
        a, b = make_figure("A", 100, 150), make_figure("B", 1500, 1550)
        summary = summarize_round(analyze_chain(a, b, [a, b]), figures_added=0)
        assert summary["score"] is None
        assert summary["rating"] is None
        assert summary["path"] == []
        assert summary["difficulty"] == "hard"
        assert summary["target_gap_years"] == 1350
