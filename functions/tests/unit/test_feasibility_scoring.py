"""Unit tests for feasibility scoring.

Covers:
- Rule-based assessment for residential and hotel projects
- Weighted overall score
- Deterministic display scores for non-sample projects
- Stored scores for sample projects
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from models.feasibility import CRITERION_WEIGHTS, Criterion, CriterionScore, FeasibilityAssessment
from services.feasibility_scoring import (
    DEFAULT_SAMPLE_SCORE,
    JUSTIFICATIONS,
    OVERALL_SUM_ORDER,
    assess_feasibility,
    generate_deterministic_score,
    is_sample_project,
    project_display_scores,
    round_to_tenth,
    select_justification,
    weighted_overall_score,
)


class TestWeightedOverallScore:
    """Tests for weighted_overall_score."""

    def test_weights_sum_to_one(self):
        assert sum(CRITERION_WEIGHTS.values()) == pytest.approx(1.0)

    def test_uniform_scores(self):
        scores = {criterion: 4.0 for criterion in Criterion}
        assert weighted_overall_score(scores) == pytest.approx(4.0)

    def test_accepts_string_keys_and_values(self):
        """Test the persisted shape: camelCase keys, decimal-string values."""
        scores = {
            "zoning": "5.0",
            "massing": "5.0",
            "cost": "3.0",
            "sustainability": "5.0",
            "logistics": "5.0",
            "buildTime": "5.0",
        }
        assert weighted_overall_score(scores) == pytest.approx(4.6)

    def test_missing_scores_count_as_zero(self):
        assert weighted_overall_score({Criterion.ZONING: 5}) == pytest.approx(1.0)

    def test_sums_in_card_order_and_rounds_half_up(self):
        """Test that 2.35 as summed in card order rounds to 2.4."""
        scores = {
            "zoning": 1,
            "massing": 1,
            "sustainability": 1,
            "cost": 4,
            "logistics": 4,
            "buildTime": 4,
        }
        assert weighted_overall_score(scores) == 2.4

    def test_sum_order_covers_every_criterion(self):
        assert set(OVERALL_SUM_ORDER) == set(Criterion)
        assert [c.value for c in OVERALL_SUM_ORDER] == [
            "zoning", "massing", "sustainability", "cost", "logistics", "buildTime"
        ]

    @pytest.mark.parametrize(
        "value,expected",
        [(4.75, 4.8), (0.25, 0.3), (4.45, 4.5), (4.44, 4.4), (5.0, 5.0)],
    )
    def test_round_to_tenth_halves_up(self, value, expected):
        assert round_to_tenth(value) == expected


class TestSelectJustification:
    """Tests for select_justification."""

    def test_score_bands(self):
        strong, favourable, constrained = JUSTIFICATIONS[Criterion.COST]

        assert select_justification(Criterion.COST, 5.0) == strong
        assert select_justification(Criterion.COST, 4.5) == strong
        assert select_justification(Criterion.COST, 4.0) == favourable
        assert select_justification(Criterion.COST, 3.0) == constrained

    def test_every_criterion_has_text(self):
        for criterion in Criterion:
            assert all(JUSTIFICATIONS[criterion])


class TestAssessFeasibility:
    """Tests for assess_feasibility."""

    def test_residential_project(self, sample_project):
        assessment = assess_feasibility(sample_project)

        assert isinstance(assessment, FeasibilityAssessment)
        assert assessment.score_for(Criterion.ZONING).score == 5
        assert assessment.score_for(Criterion.MASSING).score == 5
        assert assessment.score_for(Criterion.COST).score == 5
        assert assessment.score_for(Criterion.LOGISTICS).score == 4
        assert assessment.overall_score == pytest.approx(4.85, abs=0.06)

    def test_hotel_project(self, hotel_project):
        """Test that hotels score lower on cost and higher on logistics."""
        assessment = assess_feasibility(hotel_project)

        assert assessment.score_for(Criterion.COST).score == 3
        assert assessment.score_for(Criterion.LOGISTICS).score == 5
        # No unit mix defined
        assert assessment.score_for(Criterion.MASSING).score == 3
        assert assessment.overall_score == pytest.approx(4.3)

    def test_hotel_type_is_case_insensitive(self):
        assessment = assess_feasibility({"projectType": "Hostel", "oneBedUnits": 10})

        assert assessment.score_for(Criterion.COST).score == 3
        assert assessment.overall_score == pytest.approx(4.6)

    def test_justifications_follow_scores(self, hotel_project):
        assessment = assess_feasibility(hotel_project)
        cost = assessment.score_for(Criterion.COST)

        assert cost.justification == JUSTIFICATIONS[Criterion.COST][2]

    def test_all_criteria_scored(self, sample_project):
        assessment = assess_feasibility(sample_project)

        assert [entry.criterion for entry in assessment.scores] == list(Criterion)
        assert all(1 <= entry.score <= 5 for entry in assessment.scores)

    def test_to_project_fields(self, hotel_project):
        fields = assess_feasibility(hotel_project).to_project_fields()

        assert fields["costScore"] == "3.0"
        assert fields["buildTimeScore"] == "5.0"
        assert fields["overallScore"] == "4.3"
        assert fields["zoningJustification"] == JUSTIFICATIONS[Criterion.ZONING][0]

    def test_score_for_unscored_criterion(self):
        with pytest.raises(KeyError):
            FeasibilityAssessment().score_for(Criterion.ZONING)

    def test_criterion_score_range_enforced(self):
        with pytest.raises(PydanticValidationError):
            CriterionScore(criterion=Criterion.ZONING, score=6)


class TestDeterministicScores:
    """Tests for generate_deterministic_score and project_display_scores."""

    @pytest.mark.parametrize("project_id", [0, 1, 42, 12345, "17", "proj-abc"])
    def test_score_in_range(self, project_id):
        score = generate_deterministic_score(project_id)

        assert len(score.split(".")[1]) == 1
        assert 4.4 <= float(score) <= 5.0

    def test_same_id_same_score(self):
        assert generate_deterministic_score(42) == generate_deterministic_score(42)
        assert generate_deterministic_score("proj-abc") == generate_deterministic_score("proj-abc")

    def test_numeric_string_id_matches_int(self):
        assert generate_deterministic_score("42") == generate_deterministic_score(42)

    def test_display_scores_are_stable(self, hotel_project):
        first = project_display_scores(hotel_project)
        second = project_display_scores(dict(hotel_project))

        assert first == second
        assert set(first["individual"]) == {c.value for c in Criterion}

    def test_display_overall_matches_individual(self, sample_project):
        result = project_display_scores(sample_project)

        expected = weighted_overall_score(result["individual"])
        assert result["overall"] == f"{expected:.1f}"
        assert all(4.4 <= float(v) <= 5.0 for v in result["individual"].values())

    @pytest.mark.parametrize("project_id", [21, 602])
    def test_display_overall_rounds_half_up(self, project_id):
        """Test ids whose weighted sum lands on a .x5 boundary."""
        assert project_display_scores({"id": project_id})["overall"] == "4.6"

    def test_integral_float_id_matches_int(self):
        assert project_display_scores({"id": 21.0}) == project_display_scores({"id": 21})

    def test_fractional_float_id_scored(self):
        result = project_display_scores({"id": 1.5})

        assert result == project_display_scores({"id": "1.5"})
        assert 4.4 <= float(result["overall"]) <= 5.0


class TestSampleProjects:
    """Tests for showcase sample projects."""

    def test_is_sample_project(self):
        assert is_sample_project("Serenity Village")
        assert not is_sample_project("Test Village")
        assert not is_sample_project(None)

    def test_stored_scores_used(self):
        project = {
            "id": 1,
            "name": "Serenity Village",
            "zoningScore": "4.8",
            "massingScore": "4.6",
            "costScore": "4.7",
            "sustainabilityScore": "4.9",
            "logisticsScore": "4.5",
            "buildTimeScore": "4.9",
        }
        result = project_display_scores(project)

        assert result["individual"]["zoning"] == "4.8"
        assert result["individual"]["buildTime"] == "4.9"
        # 0.96 + 0.69 + 0.94 + 0.98 + 0.675 + 0.49
        assert float(result["overall"]) == pytest.approx(4.7, abs=0.06)

    def test_missing_stored_scores_default(self):
        result = project_display_scores({"name": "Workforce Commons"})

        assert set(result["individual"].values()) == {DEFAULT_SAMPLE_SCORE}
        assert result["overall"] == "4.0"

    def test_sample_names_come_from_settings(self):
        with patch("services.feasibility_scoring.settings") as mock_settings:
            mock_settings.sample_project_names = ("Test Village",)

            assert is_sample_project("Test Village")
            assert not is_sample_project("Serenity Village")
