"""Max-effort main-lift rotation for a wave.

A conjugate rotation alternates squat and deadlift variations on the lower
max-effort day and bench and overhead press variations on the upper day.
Even weeks (0, 2, 4, ...) take a squat and a bench variation, odd weeks a
deadlift and an overhead press variation. Each pattern's candidates are
shuffled once and consumed without replacement, so no variation repeats
within the wave.
"""

from __future__ import annotations

import random
from typing import Iterable

from lifttrax.core.exceptions import InsufficientVarietyError
from lifttrax.core.logging import get_logger
from lifttrax.models.enums import MovementPattern
from lifttrax.models.exercise import Exercise
from lifttrax.repositories.catalog_repository import ExerciseCatalog

logger = get_logger(__name__)

LOWER_PATTERNS = (MovementPattern.SQUAT, MovementPattern.DEADLIFT)
UPPER_PATTERNS = (MovementPattern.BENCH_PRESS, MovementPattern.OVERHEAD_PRESS)


def sorted_options(exercises: Iterable[Exercise]) -> list[Exercise]:
    """Sort by name and drop entries whose normalized names repeat."""
    seen: set[str] = set()
    options: list[Exercise] = []
    for exercise in sorted(exercises, key=lambda e: e.key):
        if exercise.key not in seen:
            seen.add(exercise.key)
            options.append(exercise)
    return options


def required_counts(week_count: int) -> dict[MovementPattern, int]:
    """Distinct variations each pattern must supply for ``week_count`` weeks."""
    even_weeks = (week_count + 1) // 2
    odd_weeks = week_count // 2
    return {
        MovementPattern.SQUAT: even_weeks,
        MovementPattern.DEADLIFT: odd_weeks,
        MovementPattern.BENCH_PRESS: even_weeks,
        MovementPattern.OVERHEAD_PRESS: odd_weeks,
    }


def pattern_for_week(week_index: int, upper: bool = False) -> MovementPattern:
    """Main-lift pattern scheduled for a 0-indexed week."""
    patterns = UPPER_PATTERNS if upper else LOWER_PATTERNS
    return patterns[week_index % 2]


class MovementPatternRotation:
    """Per-week lower and upper max-effort lifts for one wave.

    Args:
        week_count: Number of weeks in the wave
        catalog: Catalog to query for squat/deadlift/bench/overhead variations
        rng: Random source used to shuffle each pattern once

    Raises:
        InsufficientVarietyError: If a pattern has fewer distinct variations
            than the wave needs
    """

    def __init__(self, week_count: int, catalog: ExerciseCatalog, rng: random.Random):
        self.week_count = week_count
        self.options: dict[MovementPattern, list[Exercise]] = {
            pattern: sorted_options(catalog.exercises_by_pattern(pattern))
            for pattern in LOWER_PATTERNS + UPPER_PATTERNS
        }

        for pattern, required in required_counts(week_count).items():
            available = len(self.options[pattern])
            if available < required:
                raise InsufficientVarietyError(pattern.value, required, available)

        shuffled = {pattern: list(options) for pattern, options in self.options.items()}
        for pattern in LOWER_PATTERNS + UPPER_PATTERNS:
            rng.shuffle(shuffled[pattern])

        self.lower: list[Exercise] = []
        self.upper: list[Exercise] = []
        taken = dict.fromkeys(shuffled, 0)
        for week_index in range(week_count):
            for sequence, upper in ((self.lower, False), (self.upper, True)):
                pattern = pattern_for_week(week_index, upper=upper)
                sequence.append(shuffled[pattern][taken[pattern]])
                taken[pattern] += 1

        logger.debug(
            "main_lift_rotation_built",
            week_count=week_count,
            lower=[e.name for e in self.lower],
            upper=[e.name for e in self.upper],
        )

    def schedule(self) -> tuple[list[Exercise], list[Exercise]]:
        """Return copies of the lower and upper sequences."""
        return list(self.lower), list(self.upper)

    def alternatives_for_week(self, week_index: int, upper: bool = False) -> list[Exercise]:
        """Legal substitutes for a week's main-lift slot (same pattern)."""
        return list(self.options[pattern_for_week(week_index, upper=upper)])
