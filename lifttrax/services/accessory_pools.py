"""Warm-up and accessory pools for a wave.

One ``BoundedRandomPool`` is kept per accessory muscle, per-region pools are
kept for warm-up mobility and warm-up accessories, so consecutive draws for
the same slot never repeat an exercise. Core exercises are shared by warm-ups
and accessory circuits; a per-day ``used_cores`` set keeps the same core
exercise from appearing twice on one training day.
"""

from __future__ import annotations

import random
from typing import Iterable

from lifttrax.config.wave_policy import CatalogRequirements, Circuits, EntryNames
from lifttrax.core.exceptions import EmptyRequiredPoolError, InsufficientVarietyError
from lifttrax.core.logging import get_logger
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle
from lifttrax.models.exercise import Exercise
from lifttrax.models.workout import CircuitPrescription, Reps, SetPrescription, WorkoutEntry
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.services.random_pool import BoundedRandomPool

logger = get_logger(__name__)


class AccessoryAndWarmupPools:
    """Bounded random pools supplying warm-ups, accessories and finishers.

    Args:
        catalog: Catalog snapshot to build the pools from
        rng: Random source shared by every pool and rep-count draw

    Raises:
        InsufficientVarietyError: If a required accessory muscle has no
            exercises, or a region has fewer than two warm-up accessories
        EmptyRequiredPoolError: If a region has no mobility exercises
    """

    def __init__(self, catalog: ExerciseCatalog, rng: random.Random):
        self._rng = rng

        self._accessories: dict[Muscle, BoundedRandomPool[Exercise]] = {}
        for muscle in CatalogRequirements.REQUIRED_ACCESSORY_MUSCLES:
            exercises = catalog.accessories_by_muscle(muscle)
            if not exercises:
                raise InsufficientVarietyError(muscle.value, 1, 0)
            self._accessories[muscle] = BoundedRandomPool(exercises, rng)

        forearms = catalog.accessories_by_muscle(Muscle.FOREARM)
        self._forearms: BoundedRandomPool[Exercise] | None = (
            BoundedRandomPool(forearms, rng) if forearms else None
        )

        self._mobility: dict[ExerciseRegion, BoundedRandomPool[Exercise]] = {}
        self._warmup_accessories: dict[ExerciseRegion, BoundedRandomPool[Exercise]] = {}
        for region in ExerciseRegion:
            mobility = catalog.exercises_by_region_and_pattern(region, MovementPattern.MOBILITY)
            if not mobility:
                raise EmptyRequiredPoolError(f"{region.value} mobility")
            self._mobility[region] = BoundedRandomPool(mobility, rng)

            accessories = [
                exercise
                for exercise in catalog.exercises_by_region_and_pattern(
                    region, MovementPattern.ACCESSORY
                )
                if not exercise.targets_any(Circuits.WARMUP_EXCLUDED_MUSCLES)
            ]
            if len(accessories) < Circuits.WARMUP_ACCESSORY_COUNT:
                raise InsufficientVarietyError(
                    f"{region.value} warmup accessory",
                    Circuits.WARMUP_ACCESSORY_COUNT,
                    len(accessories),
                )
            self._warmup_accessories[region] = BoundedRandomPool(accessories, rng)

        logger.debug(
            "accessory_pools_built",
            accessory_sizes={m.value: len(p) for m, p in self._accessories.items()},
            forearm_size=len(self._forearms) if self._forearms else 0,
        )

    @property
    def has_forearm_pool(self) -> bool:
        return self._forearms is not None

    def _rep_target(self) -> Reps:
        return Reps(self._rng.randint(Circuits.ACCESSORY_MIN_REPS, Circuits.ACCESSORY_MAX_REPS))

    def _draw_core(self, used_cores: set[str]) -> Exercise:
        pool = self._accessories[Muscle.CORE]
        core = pool.pop_where(lambda exercise: exercise.key not in used_cores)
        if core is None:
            raise InsufficientVarietyError(Muscle.CORE.value, len(used_cores) + 1, len(pool))
        used_cores.add(core.key)
        return core

    def warmup(self, region: ExerciseRegion, used_cores: set[str]) -> WorkoutEntry:
        """Mobility, two region accessories and a core exercise, without metrics."""
        core = self._draw_core(used_cores)
        mobility = self._mobility[region].pop()
        accessory_pool = self._warmup_accessories[region]
        accessories = [accessory_pool.pop() for _ in range(Circuits.WARMUP_ACCESSORY_COUNT)]

        return WorkoutEntry(
            name=EntryNames.WARMUP,
            kind=CircuitPrescription(
                prescriptions=tuple(
                    SetPrescription(exercise=exercise)
                    for exercise in (mobility, *accessories, core)
                ),
                rounds=Circuits.ROUNDS,
                rest_seconds=Circuits.REST_SECONDS,
                warmup=True,
            ),
        )

    def accessory(self, muscle: Muscle, used_cores: set[str]) -> SetPrescription:
        """One accessory exercise for ``muscle`` at 10-12 reps."""
        if muscle == Muscle.CORE:
            exercise = self._draw_core(used_cores)
        else:
            pool = self._accessories.get(muscle)
            exercise = pool.pop() if pool is not None else None
            if exercise is None:
                raise InsufficientVarietyError(muscle.value, 1, 0)
        return SetPrescription(exercise=exercise, metric=self._rep_target())

    def accessory_circuit(self, muscles: Iterable[Muscle], used_cores: set[str]) -> WorkoutEntry:
        return WorkoutEntry(
            name=EntryNames.ACCESSORY_CIRCUIT,
            kind=CircuitPrescription(
                prescriptions=tuple(self.accessory(muscle, used_cores) for muscle in muscles),
                rounds=Circuits.ROUNDS,
                rest_seconds=Circuits.REST_SECONDS,
            ),
        )

    def forearm(self) -> WorkoutEntry | None:
        """Optional forearm single; ``None`` when the catalog has no forearm work."""
        if self._forearms is None:
            return None
        exercise = self._forearms.pop()
        if exercise is None:
            return None
        return WorkoutEntry(
            name=EntryNames.FOREARM_FINISHER,
            kind=SetPrescription(exercise=exercise, metric=self._rep_target()),
        )
