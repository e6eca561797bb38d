"""Dynamic-effort (speed work) lift selection.

Unlike the max-effort rotation, speed work keeps one variation per movement
pattern for the entire wave. The default is the canonical lift for each
pattern ("Squat", "Deadlift", "Bench Press", "Overhead Press"), which can be
overridden before the wave is assembled. Each pattern is also paired with an
accommodating resistance (chains or bands) chosen once per wave.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from lifttrax.config.wave_policy import CatalogRequirements, DynamicEffort
from lifttrax.core.exceptions import ConflictError, MissingCanonicalExerciseError, NotFoundError
from lifttrax.core.logging import get_logger
from lifttrax.models.enums import AccommodatingResistance, MovementPattern
from lifttrax.models.exercise import Exercise, normalize_name
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.services.movement_rotation import sorted_options

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpeedLift:
    """A speed-work variation and the resistance used with it all wave."""

    exercise: Exercise
    resistance: AccommodatingResistance


@dataclass(frozen=True)
class SpeedWorkPlan:
    """Finalized speed-work lifts keyed by movement pattern."""

    lifts: dict[MovementPattern, SpeedLift]

    def __getitem__(self, pattern: MovementPattern) -> SpeedLift:
        return self.lifts[pattern]


def speed_work_options(catalog: ExerciseCatalog, pattern: MovementPattern) -> list[Exercise]:
    """All variations for ``pattern`` with the canonical lift first.

    The canonical lift is looked up by name when the pattern query does not
    include it.

    Raises:
        MissingCanonicalExerciseError: If the canonical lift is not in the
            catalog, even when other variations of the pattern are
    """
    canonical_name = CatalogRequirements.CANONICAL_NAMES[pattern]
    canonical_key = normalize_name(canonical_name)
    options = sorted_options(catalog.exercises_by_pattern(pattern))

    for index, exercise in enumerate(options):
        if exercise.key == canonical_key:
            options.insert(0, options.pop(index))
            return options

    try:
        options.insert(0, catalog.get_exercise(canonical_name))
    except (NotFoundError, ConflictError):
        raise MissingCanonicalExerciseError(pattern.value, canonical_name) from None
    return options


class SpeedWorkSelection:
    """Default speed-work choices for a wave.

    Args:
        catalog: Catalog to query for each main pattern
        rng: Random source for the per-pattern resistance

    Raises:
        MissingCanonicalExerciseError: If a canonical lift is missing
    """

    def __init__(self, catalog: ExerciseCatalog, rng: random.Random):
        self.patterns: tuple[MovementPattern, ...] = CatalogRequirements.MAIN_PATTERNS
        self.options: dict[MovementPattern, list[Exercise]] = {
            pattern: speed_work_options(catalog, pattern) for pattern in self.patterns
        }
        self.resistance: dict[MovementPattern, AccommodatingResistance] = {
            pattern: rng.choice(DynamicEffort.RESISTANCE_CHOICES) for pattern in self.patterns
        }
        logger.debug(
            "speed_work_options_built",
            options={p.value: len(o) for p, o in self.options.items()},
            resistance={p.value: r.value for p, r in self.resistance.items()},
        )

    def defaults(self) -> list[Exercise]:
        """Default variation per pattern, in ``patterns`` order."""
        return [self.options[pattern][0] for pattern in self.patterns]

    def alternatives(self) -> list[list[Exercise]]:
        return [list(self.options[pattern]) for pattern in self.patterns]

    def labels(self) -> list[str]:
        return [CatalogRequirements.CANONICAL_NAMES[pattern] for pattern in self.patterns]

    def finalize(self, selected: Sequence[Exercise] | None = None) -> SpeedWorkPlan:
        """Pair each selected variation with its pattern's resistance."""
        chosen = list(selected) if selected is not None else self.defaults()
        if len(chosen) != len(self.patterns):
            raise ValueError(
                f"expected {len(self.patterns)} speed-work selections, got {len(chosen)}"
            )
        return SpeedWorkPlan(
            lifts={
                pattern: SpeedLift(exercise=exercise, resistance=self.resistance[pattern])
                for pattern, exercise in zip(self.patterns, chosen)
            }
        )
