"""Tests for the max-effort main-lift rotation."""
import random

import pytest

from lifttrax.core.exceptions import InsufficientVarietyError
from lifttrax.models.enums import ExerciseRegion, MovementPattern
from lifttrax.models.exercise import Exercise
from lifttrax.services.movement_rotation import (
    MovementPatternRotation,
    pattern_for_week,
    required_counts,
    sorted_options,
)


class TestRequiredCounts:
    """Test per-pattern variety requirements."""

    def test_odd_week_count(self):
        """Test squat/bench need ceil(N/2), deadlift/overhead need floor(N/2)."""
        assert required_counts(7) == {
            MovementPattern.SQUAT: 4,
            MovementPattern.DEADLIFT: 3,
            MovementPattern.BENCH_PRESS: 4,
            MovementPattern.OVERHEAD_PRESS: 3,
        }

    def test_single_week(self):
        """Test a one-week wave needs no deadlift or overhead variations."""
        counts = required_counts(1)

        assert counts[MovementPattern.SQUAT] == 1
        assert counts[MovementPattern.DEADLIFT] == 0

    def test_pattern_for_week_alternates(self):
        """Test even weeks are squat/bench and odd weeks deadlift/overhead."""
        assert pattern_for_week(0) == MovementPattern.SQUAT
        assert pattern_for_week(1) == MovementPattern.DEADLIFT
        assert pattern_for_week(4, upper=True) == MovementPattern.BENCH_PRESS
        assert pattern_for_week(5, upper=True) == MovementPattern.OVERHEAD_PRESS


class TestSortedOptions:
    """Test option ordering and de-duplication."""

    def test_sorted_and_deduplicated_by_normalized_name(self):
        """Test names differing only by case or spacing collapse to one option."""
        exercises = [
            Exercise.create("Safety Bar Squat", ExerciseRegion.LOWER, MovementPattern.SQUAT),
            Exercise.create("box  squat", ExerciseRegion.LOWER, MovementPattern.SQUAT),
            Exercise.create("Box Squat", ExerciseRegion.LOWER, MovementPattern.SQUAT),
        ]

        options = sorted_options(exercises)

        assert [option.key for option in options] == ["box squat", "safety bar squat"]


class TestMovementPatternRotation:
    """Test the per-week lower and upper sequences."""

    @pytest.mark.parametrize("week_count", [1, 2, 5, 8])
    def test_sequences_alternate_patterns(self, make_catalog, week_count):
        """Test lower/upper lifts follow the even/odd pattern alternation."""
        rotation = MovementPatternRotation(week_count, make_catalog(), random.Random(week_count))
        lower, upper = rotation.schedule()

        assert len(lower) == len(upper) == week_count
        for i in range(week_count):
            assert lower[i].pattern == pattern_for_week(i)
            assert upper[i].pattern == pattern_for_week(i, upper=True)

    def test_no_repeats_within_wave(self, make_catalog, rng):
        """Test no main lift is scheduled twice in the same sequence."""
        rotation = MovementPatternRotation(8, make_catalog(), rng)
        lower, upper = rotation.schedule()

        assert len({e.key for e in lower}) == 8
        assert len({e.key for e in upper}) == 8

    def test_exact_minimum_catalog(self, make_catalog, rng):
        """Test a catalog with exactly the required variety uses every entry."""
        catalog = make_catalog(squats=4, deadlifts=3, benches=4, overheads=3)

        lower, upper = MovementPatternRotation(7, catalog, rng).schedule()

        assert {e.key for e in lower} == {
            e.key
            for e in catalog.exercises_by_pattern(MovementPattern.SQUAT)
            + catalog.exercises_by_pattern(MovementPattern.DEADLIFT)
        }
        assert len({e.key for e in upper}) == 7

    def test_insufficient_variety_names_pattern(self, make_catalog, rng):
        """Test a short pattern fails with its name and counts."""
        catalog = make_catalog(squats=3)

        with pytest.raises(InsufficientVarietyError) as exc_info:
            MovementPatternRotation(7, catalog, rng)

        assert exc_info.value.subject == "squat"
        assert exc_info.value.required == 4
        assert exc_info.value.available == 3
        assert exc_info.value.code == "GEN_VARIETY_SQUAT"

    def test_single_week_without_deadlifts(self, make_catalog, rng):
        """Test one week only needs a squat and a bench variation."""
        catalog = make_catalog(squats=1, deadlifts=0, benches=1, overheads=0)

        lower, upper = MovementPatternRotation(1, catalog, rng).schedule()

        assert lower[0].name == "Squat"
        assert upper[0].name == "Bench Press"

    def test_schedule_returns_copies(self, make_catalog, rng):
        """Test callers cannot mutate the rotation through schedule()."""
        rotation = MovementPatternRotation(2, make_catalog(), rng)
        lower, _ = rotation.schedule()
        lower.clear()

        assert len(rotation.schedule()[0]) == 2

    def test_alternatives_are_same_pattern(self, make_catalog, rng):
        """Test week alternatives list every variation of that week's pattern."""
        catalog = make_catalog()
        rotation = MovementPatternRotation(4, catalog, rng)

        alternatives = rotation.alternatives_for_week(1, upper=True)

        assert alternatives == catalog.exercises_by_pattern(MovementPattern.OVERHEAD_PRESS)
