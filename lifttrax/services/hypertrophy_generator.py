"""
HypertrophyWaveGenerator - Rep-range waves built from the same catalog.

Each week has four training days, two per region:

* Monday: upper, bench press main work, overhead press supplemental
* Tuesday: lower, squat main work, deadlift supplemental
* Thursday: upper, overhead press main work, bench press supplemental
* Friday: lower, deadlift main work, squat supplemental

Every day is a warm-up circuit, four main sets and three supplemental sets
prescribed as rep ranges at RPE 8, then an accessory circuit. Lifts are
drawn from one ``BoundedRandomPool`` per movement pattern, so a variation
is not repeated on consecutive draws from its pattern.
"""

from __future__ import annotations

import random

from lifttrax.config.wave_policy import CatalogRequirements, EntryNames, Hypertrophy
from lifttrax.core.exceptions import InsufficientVarietyError, ValidationError
from lifttrax.core.logging import add_log_context, get_logger, remove_log_context
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle, WaveProgram, Weekday
from lifttrax.models.exercise import Exercise
from lifttrax.models.workout import DayWorkout, RepsRange, SetPrescription, Wave, Week, WorkoutEntry
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.services.accessory_pools import AccessoryAndWarmupPools
from lifttrax.services.random_pool import BoundedRandomPool

logger = get_logger(__name__)


class HypertrophyWaveGenerator:
    """
    Builds hypertrophy waves from an exercise catalog.

    Args:
        catalog: Read-only exercise catalog
        rng: Random source; a fresh ``random.Random()`` per call when omitted
    """

    def __init__(self, catalog: ExerciseCatalog, rng: random.Random | None = None):
        self.catalog = catalog
        self.rng = rng

    def generate(self, week_count: int) -> Wave:
        """
        Generate a hypertrophy wave of ``week_count`` weeks.

        Raises:
            ValidationError: If ``week_count`` is less than one
            GenerationError: If a main pattern or accessory pool is empty
        """
        if week_count < 1:
            raise ValidationError("week_count", f"must be at least 1, got {week_count}")

        rng = self.rng or random.Random()
        add_log_context(week_count=week_count, program=WaveProgram.HYPERTROPHY.value)
        try:
            lifts = self._lift_pools(rng)
            pools = AccessoryAndWarmupPools(self.catalog, rng)
            wave = Wave(weeks=[self._build_week(lifts, pools) for _ in range(week_count)])
            logger.info("wave_generated", weeks=len(wave))
            return wave
        finally:
            remove_log_context("week_count", "program")

    def _lift_pools(self, rng: random.Random) -> dict[MovementPattern, BoundedRandomPool[Exercise]]:
        pools = {}
        for pattern in CatalogRequirements.MAIN_PATTERNS:
            exercises = self.catalog.exercises_by_pattern(pattern)
            if not exercises:
                raise InsufficientVarietyError(pattern.value, 1, 0)
            pools[pattern] = BoundedRandomPool(exercises, rng)
        return pools

    @staticmethod
    def _sets(
        name: str, lift: Exercise, sets: int, reps: tuple[int, int]
    ) -> list[WorkoutEntry]:
        prescription = SetPrescription(
            exercise=lift, metric=RepsRange(*reps), rpe=Hypertrophy.RPE
        )
        return [WorkoutEntry(name=name, kind=prescription) for _ in range(sets)]

    def _day(
        self,
        region: ExerciseRegion,
        main: Exercise,
        supplemental: Exercise,
        muscles: tuple[Muscle, ...],
        pools: AccessoryAndWarmupPools,
    ) -> DayWorkout:
        if region == ExerciseRegion.UPPER:
            main_reps, supplemental_reps = Hypertrophy.UPPER_MAIN_REPS, Hypertrophy.UPPER_SUPPLEMENTAL_REPS
        else:
            main_reps, supplemental_reps = Hypertrophy.LOWER_MAIN_REPS, Hypertrophy.LOWER_SUPPLEMENTAL_REPS

        used_cores: set[str] = set()
        entries = [pools.warmup(region, used_cores)]
        entries += self._sets(EntryNames.MAIN_HYPERTROPHY, main, Hypertrophy.MAIN_SETS, main_reps)
        entries += self._sets(
            EntryNames.SUPPLEMENTAL_HYPERTROPHY,
            supplemental,
            Hypertrophy.SUPPLEMENTAL_SETS,
            supplemental_reps,
        )
        entries.append(pools.accessory_circuit(muscles, used_cores))
        return DayWorkout(entries=entries)

    def _build_week(
        self,
        lifts: dict[MovementPattern, BoundedRandomPool[Exercise]],
        pools: AccessoryAndWarmupPools,
    ) -> Week:
        bench = lifts[MovementPattern.BENCH_PRESS]
        overhead = lifts[MovementPattern.OVERHEAD_PRESS]
        squat = lifts[MovementPattern.SQUAT]
        deadlift = lifts[MovementPattern.DEADLIFT]

        week = Week()
        week.days[Weekday.MONDAY] = self._day(
            ExerciseRegion.UPPER, bench.pop(), overhead.pop(), Hypertrophy.UPPER_ACCESSORIES, pools
        )
        week.days[Weekday.TUESDAY] = self._day(
            ExerciseRegion.LOWER, squat.pop(), deadlift.pop(), Hypertrophy.LOWER_ACCESSORIES, pools
        )
        week.days[Weekday.THURSDAY] = self._day(
            ExerciseRegion.UPPER,
            overhead.pop(),
            bench.pop(),
            Hypertrophy.UPPER_SHOULDER_ACCESSORIES,
            pools,
        )
        week.days[Weekday.FRIDAY] = self._day(
            ExerciseRegion.LOWER,
            deadlift.pop(),
            squat.pop(),
            Hypertrophy.LOWER_POSTERIOR_ACCESSORIES,
            pools,
        )
        return week


def generate_hypertrophy_wave(
    week_count: int,
    catalog: ExerciseCatalog,
    *,
    rng: random.Random | None = None,
) -> Wave:
    """Generate a hypertrophy wave; see ``HypertrophyWaveGenerator.generate``."""
    return HypertrophyWaveGenerator(catalog, rng=rng).generate(week_count)
