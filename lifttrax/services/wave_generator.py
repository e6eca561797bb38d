"""
ConjugateWaveGenerator - Assembles multi-week conjugate training waves.

Each week has four training days:

* Monday: lower max effort
* Tuesday: upper max effort
* Thursday: lower dynamic effort
* Friday: upper dynamic effort

Every day follows the same template: warm-up circuit, main work, accessory
circuit, conditioning and an optional forearm finisher. Main lifts rotate
week to week (see ``MovementPatternRotation``); speed-work lifts stay fixed
for the wave (see ``SpeedWorkSelection``). Both sets of defaults pass through
a ``SelectionResolver`` before any week is built.

Generation is all-or-nothing: any shortage in the catalog raises a
``GenerationError`` and no partial wave is returned.
"""

from __future__ import annotations

import random

from lifttrax.config.wave_policy import (
    Conditioning,
    DynamicEffort,
    EntryNames,
    MaxEffort,
)
from lifttrax.core.exceptions import EmptyRequiredPoolError, ValidationError
from lifttrax.core.logging import add_log_context, get_logger, remove_log_context
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle, Weekday
from lifttrax.models.exercise import Exercise
from lifttrax.models.workout import (
    DayWorkout,
    Reps,
    SetPrescription,
    TimeSecs,
    Wave,
    Week,
    WorkoutEntry,
)
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.services.accessory_pools import AccessoryAndWarmupPools
from lifttrax.services.movement_rotation import MovementPatternRotation
from lifttrax.services.overrides import SelectionResolver, resolve_selections
from lifttrax.services.random_pool import BoundedRandomPool
from lifttrax.services.speed_work import SpeedLift, SpeedWorkPlan, SpeedWorkSelection

logger = get_logger(__name__)


def _repeat(name: str, prescription: SetPrescription, sets: int) -> list[WorkoutEntry]:
    return [WorkoutEntry(name=name, kind=prescription) for _ in range(sets)]


class ConjugateWaveGenerator:
    """
    Builds conjugate waves from an exercise catalog.

    The generator itself holds no per-wave state; pools and selections are
    rebuilt on every ``generate`` call from the catalog snapshot.

    Args:
        catalog: Read-only exercise catalog
        rng: Random source; a fresh ``random.Random()`` per call when omitted
        resolver: Optional override strategy for main and speed-work lifts
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        rng: random.Random | None = None,
        resolver: SelectionResolver | None = None,
    ):
        self.catalog = catalog
        self.rng = rng
        self.resolver = resolver

    def generate(self, week_count: int) -> Wave:
        """
        Generate a wave of ``week_count`` weeks.

        Raises:
            ValidationError: If ``week_count`` is less than one
            GenerationError: If the catalog cannot support the wave
        """
        if week_count < 1:
            raise ValidationError("week_count", f"must be at least 1, got {week_count}")

        rng = self.rng or random.Random()
        add_log_context(week_count=week_count)
        try:
            lower, upper = self._main_lifts(week_count, rng)
            speed = self._speed_work(rng)

            conditioning_options = self.catalog.exercises_by_pattern(MovementPattern.CONDITIONING)
            if not conditioning_options:
                raise EmptyRequiredPoolError("conditioning")
            conditioning = BoundedRandomPool(conditioning_options, rng)
            pools = AccessoryAndWarmupPools(self.catalog, rng)

            wave = Wave(
                weeks=[
                    self._build_week(i, lower, upper, speed, pools, conditioning, rng)
                    for i in range(week_count)
                ]
            )
            logger.info(
                "wave_generated",
                weeks=len(wave),
                lower=[e.name for e in lower],
                upper=[e.name for e in upper],
            )
            return wave
        finally:
            remove_log_context("week_count")

    # =========================================================================
    # Selections
    # =========================================================================

    def _main_lifts(
        self, week_count: int, rng: random.Random
    ) -> tuple[list[Exercise], list[Exercise]]:
        rotation = MovementPatternRotation(week_count, self.catalog, rng)
        lower, upper = rotation.schedule()

        alternatives = [rotation.alternatives_for_week(i) for i in range(week_count)]
        alternatives += [rotation.alternatives_for_week(i, upper=True) for i in range(week_count)]
        labels = [f"Week {i + 1} lower" for i in range(week_count)]
        labels += [f"Week {i + 1} upper" for i in range(week_count)]

        selected = resolve_selections(
            self.resolver, lower + upper, alternatives, labels, purpose="main_lifts"
        )
        return selected[:week_count], selected[week_count:]

    def _speed_work(self, rng: random.Random) -> SpeedWorkPlan:
        selection = SpeedWorkSelection(self.catalog, rng)
        selected = resolve_selections(
            self.resolver,
            selection.defaults(),
            selection.alternatives(),
            selection.labels(),
            purpose="speed_work",
        )
        return selection.finalize(selected)

    # =========================================================================
    # Entries
    # =========================================================================

    @staticmethod
    def _max_effort_single(lift: Exercise) -> WorkoutEntry:
        return WorkoutEntry(
            name=EntryNames.MAX_EFFORT,
            kind=SetPrescription(exercise=lift, metric=Reps(MaxEffort.SINGLE_REPS)),
        )

    @staticmethod
    def _backoff_sets(lift: Exercise, rng: random.Random) -> list[WorkoutEntry]:
        """Either one heavy set of 3-5 or three triples, with equal odds."""
        if rng.random() < MaxEffort.HEAVY_BACKOFF_PROBABILITY:
            reps = rng.randint(MaxEffort.HEAVY_BACKOFF_MIN_REPS, MaxEffort.HEAVY_BACKOFF_MAX_REPS)
            return _repeat(
                EntryNames.BACKOFF_SET,
                SetPrescription(
                    exercise=lift,
                    metric=Reps(reps),
                    percent=MaxEffort.HEAVY_BACKOFF_PERCENT,
                ),
                1,
            )
        return _repeat(
            EntryNames.BACKOFF_SETS,
            SetPrescription(
                exercise=lift,
                metric=Reps(MaxEffort.TRIPLES_BACKOFF_REPS),
                percent=MaxEffort.TRIPLES_BACKOFF_PERCENT,
            ),
            MaxEffort.TRIPLES_BACKOFF_SETS,
        )

    @staticmethod
    def _supplemental_sets(lift: Exercise) -> list[WorkoutEntry]:
        return _repeat(
            EntryNames.SUPPLEMENTAL,
            SetPrescription(
                exercise=lift,
                metric=Reps(MaxEffort.SUPPLEMENTAL_REPS),
                percent=MaxEffort.SUPPLEMENTAL_PERCENT,
            ),
            MaxEffort.SUPPLEMENTAL_SETS,
        )

    @staticmethod
    def _dynamic_sets(lift: SpeedLift, sets: int, reps: int, percent: int) -> list[WorkoutEntry]:
        return _repeat(
            EntryNames.DYNAMIC_EFFORT,
            SetPrescription(
                exercise=lift.exercise,
                metric=Reps(reps),
                percent=percent,
                accommodating_resistance=lift.resistance,
            ),
            sets,
        )

    @staticmethod
    def _conditioning(pool: BoundedRandomPool[Exercise]) -> WorkoutEntry:
        exercise = pool.pop()
        if exercise is None:
            raise EmptyRequiredPoolError("conditioning")
        return WorkoutEntry(
            name=EntryNames.CONDITIONING,
            kind=SetPrescription(exercise=exercise, metric=TimeSecs(Conditioning.DURATION_SECONDS)),
        )

    @staticmethod
    def _finish_day(
        entries: list[WorkoutEntry],
        accessory_circuit: WorkoutEntry,
        conditioning: BoundedRandomPool[Exercise],
        pools: AccessoryAndWarmupPools,
    ) -> DayWorkout:
        entries.append(accessory_circuit)
        entries.append(ConjugateWaveGenerator._conditioning(conditioning))
        finisher = pools.forearm()
        if finisher is not None:
            entries.append(finisher)
        return DayWorkout(entries=entries)

    # =========================================================================
    # Days
    # =========================================================================

    def _max_effort_day(
        self,
        region: ExerciseRegion,
        lift: Exercise,
        next_lift: Exercise,
        muscles: tuple[Muscle, ...],
        pools: AccessoryAndWarmupPools,
        conditioning: BoundedRandomPool[Exercise],
        rng: random.Random,
    ) -> DayWorkout:
        used_cores: set[str] = set()
        entries = [pools.warmup(region, used_cores), self._max_effort_single(lift)]
        entries += self._backoff_sets(lift, rng)
        entries += self._supplemental_sets(next_lift)
        circuit = pools.accessory_circuit(muscles, used_cores)
        return self._finish_day(entries, circuit, conditioning, pools)

    def _dynamic_effort_day(
        self,
        region: ExerciseRegion,
        blocks: list[tuple[SpeedLift, int, int]],
        percent: int,
        muscles: tuple[Muscle, ...],
        pools: AccessoryAndWarmupPools,
        conditioning: BoundedRandomPool[Exercise],
    ) -> DayWorkout:
        used_cores: set[str] = set()
        entries = [pools.warmup(region, used_cores)]
        for lift, sets, reps in blocks:
            entries += self._dynamic_sets(lift, sets, reps, percent)
        circuit = pools.accessory_circuit(muscles, used_cores)
        return self._finish_day(entries, circuit, conditioning, pools)

    def _build_week(
        self,
        week_index: int,
        lower: list[Exercise],
        upper: list[Exercise],
        speed: SpeedWorkPlan,
        pools: AccessoryAndWarmupPools,
        conditioning: BoundedRandomPool[Exercise],
        rng: random.Random,
    ) -> Week:
        # Supplemental work previews next week's main lift, wrapping at the end
        next_index = (week_index + 1) % len(lower)
        percent = DynamicEffort.percent_for_week(week_index)
        upper_third = rng.choice(MaxEffort.UPPER_ACCESSORY_OPTIONS)

        week = Week()
        week.days[Weekday.MONDAY] = self._max_effort_day(
            ExerciseRegion.LOWER,
            lower[week_index],
            lower[next_index],
            (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CALF),
            pools,
            conditioning,
            rng,
        )
        week.days[Weekday.TUESDAY] = self._max_effort_day(
            ExerciseRegion.UPPER,
            upper[week_index],
            upper[next_index],
            (Muscle.LAT, Muscle.TRICEP, upper_third),
            pools,
            conditioning,
            rng,
        )
        week.days[Weekday.THURSDAY] = self._dynamic_effort_day(
            ExerciseRegion.LOWER,
            [
                (speed[MovementPattern.SQUAT], DynamicEffort.SQUAT_SETS, DynamicEffort.SQUAT_REPS),
                (
                    speed[MovementPattern.DEADLIFT],
                    DynamicEffort.DEADLIFT_SETS,
                    DynamicEffort.DEADLIFT_REPS,
                ),
            ],
            percent,
            (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CORE),
            pools,
            conditioning,
        )
        week.days[Weekday.FRIDAY] = self._dynamic_effort_day(
            ExerciseRegion.UPPER,
            [
                (
                    speed[MovementPattern.BENCH_PRESS],
                    DynamicEffort.BENCH_SETS,
                    DynamicEffort.BENCH_REPS,
                ),
                (
                    speed[MovementPattern.OVERHEAD_PRESS],
                    DynamicEffort.OVERHEAD_SETS,
                    DynamicEffort.OVERHEAD_REPS,
                ),
            ],
            percent,
            (Muscle.LAT, Muscle.TRICEP, Muscle.BICEP),
            pools,
            conditioning,
        )
        logger.debug("week_built", week=week_index + 1, percent=percent)
        return week


def generate_wave(
    week_count: int,
    catalog: ExerciseCatalog,
    *,
    rng: random.Random | None = None,
    resolver: SelectionResolver | None = None,
) -> Wave:
    """Generate a conjugate wave; see ``ConjugateWaveGenerator.generate``."""
    return ConjugateWaveGenerator(catalog, rng=rng, resolver=resolver).generate(week_count)
