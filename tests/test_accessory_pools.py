"""Tests for warm-up, accessory and finisher pools."""
import dataclasses
import random

import pytest

from lifttrax.config.wave_policy import Circuits, EntryNames
from lifttrax.core.exceptions import EmptyRequiredPoolError, InsufficientVarietyError
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle
from lifttrax.models.workout import Reps
from lifttrax.repositories.catalog_repository import InMemoryExerciseCatalog
from lifttrax.services.accessory_pools import AccessoryAndWarmupPools


class TestPoolConstruction:
    """Test catalog requirements checked when pools are built."""

    @pytest.mark.parametrize("muscle", [Muscle.HAMSTRING, Muscle.TRAP, Muscle.CORE, Muscle.BICEP])
    def test_missing_required_muscle(self, make_catalog, rng, muscle):
        """Test an empty required muscle pool names that muscle."""
        catalog = make_catalog(skip_muscles=(muscle,))

        with pytest.raises(InsufficientVarietyError) as exc_info:
            AccessoryAndWarmupPools(catalog, rng)

        assert exc_info.value.subject == muscle.value

    def test_missing_mobility(self, make_catalog, rng):
        """Test a region without mobility work is an empty required pool."""
        catalog = make_catalog(mobility_per_region=0)

        with pytest.raises(EmptyRequiredPoolError) as exc_info:
            AccessoryAndWarmupPools(catalog, rng)

        assert exc_info.value.code == "GEN_POOL_UPPER_MOBILITY"

    def test_too_few_warmup_accessories(self, make_catalog, rng):
        """Test a region needs two accessories not tagged core or forearm."""
        exercises = []
        kept_lower = 0
        for exercise in make_catalog().list_exercises():
            is_lower_warmup = (
                exercise.region == ExerciseRegion.LOWER
                and exercise.pattern == MovementPattern.ACCESSORY
                and not exercise.targets(Muscle.CORE)
            )
            if is_lower_warmup:
                if kept_lower:
                    exercise = dataclasses.replace(exercise, region=ExerciseRegion.UPPER)
                kept_lower += 1
            exercises.append(exercise)

        with pytest.raises(InsufficientVarietyError) as exc_info:
            AccessoryAndWarmupPools(InMemoryExerciseCatalog(exercises), rng)

        assert exc_info.value.subject == "lower warmup accessory"
        assert exc_info.value.available == 1

    def test_forearm_pool_is_optional(self, make_catalog, rng):
        """Test no forearm work means no finisher rather than a failure."""
        pools = AccessoryAndWarmupPools(make_catalog(forearms=0), rng)

        assert not pools.has_forearm_pool
        assert pools.forearm() is None


class TestWarmup:
    """Test warm-up circuits."""

    @pytest.mark.parametrize("region", list(ExerciseRegion))
    def test_warmup_structure(self, catalog, rng, region):
        """Test mobility, two accessories and a core exercise, without metrics."""
        pools = AccessoryAndWarmupPools(catalog, rng)
        used_cores: set[str] = set()

        entry = pools.warmup(region, used_cores)
        circuit = entry.circuit

        assert entry.name == EntryNames.WARMUP
        assert circuit.warmup is True
        assert circuit.rounds == 3
        assert circuit.rest_seconds == 60
        assert all(p.metric is None and p.percent is None for p in circuit.prescriptions)

        mobility, first, second, core = circuit.exercises
        assert mobility.pattern == MovementPattern.MOBILITY
        assert mobility.region == region
        for accessory in (first, second):
            assert accessory.region == region
            assert not accessory.targets_any(Circuits.WARMUP_EXCLUDED_MUSCLES)
        assert first != second
        assert core.targets(Muscle.CORE)
        assert used_cores == {core.key}

    def test_warmup_accessories_distinct_across_seeds(self, catalog):
        """Test the two warm-up accessories never repeat within a circuit."""
        for seed in range(25):
            pools = AccessoryAndWarmupPools(catalog, random.Random(seed))
            for _ in range(6):
                _, first, second, _ = pools.warmup(ExerciseRegion.UPPER, set()).circuit.exercises
                assert first != second


class TestAccessories:
    """Test accessory draws and circuits."""

    def test_accessory_reps_in_range(self, catalog, rng):
        """Test accessories prescribe 10 to 12 reps."""
        pools = AccessoryAndWarmupPools(catalog, rng)

        for _ in range(30):
            prescription = pools.accessory(Muscle.LAT, set())
            assert isinstance(prescription.metric, Reps)
            assert 10 <= prescription.metric.reps <= 12
            assert prescription.exercise.targets(Muscle.LAT)

    def test_core_skips_cores_used_today(self, make_catalog):
        """Test the circuit core differs from the warm-up core on the same day."""
        catalog = make_catalog(cores=2)
        for seed in range(25):
            pools = AccessoryAndWarmupPools(catalog, random.Random(seed))
            used_cores: set[str] = set()

            warmup_core = pools.warmup(ExerciseRegion.LOWER, used_cores).circuit.exercises[-1]
            circuit_core = pools.accessory(Muscle.CORE, used_cores).exercise

            assert warmup_core.key != circuit_core.key
            assert used_cores == {warmup_core.key, circuit_core.key}

    def test_single_core_exercise_cannot_cover_two_slots(self, make_catalog, rng):
        """Test a second core draw on one day fails when only one exists."""
        pools = AccessoryAndWarmupPools(make_catalog(cores=1), rng)
        used_cores: set[str] = set()
        pools.warmup(ExerciseRegion.LOWER, used_cores)

        with pytest.raises(InsufficientVarietyError) as exc_info:
            pools.accessory(Muscle.CORE, used_cores)

        assert exc_info.value.subject == "core"

    def test_single_core_exercise_reused_on_a_new_day(self, make_catalog, rng):
        """Test the used-core set only constrains one day."""
        pools = AccessoryAndWarmupPools(make_catalog(cores=1), rng)

        first = pools.warmup(ExerciseRegion.LOWER, set()).circuit.exercises[-1]
        second = pools.warmup(ExerciseRegion.UPPER, set()).circuit.exercises[-1]

        assert first == second

    def test_accessory_circuit(self, catalog, rng):
        """Test circuits keep the requested muscle order and circuit settings."""
        pools = AccessoryAndWarmupPools(catalog, rng)
        muscles = (Muscle.HAMSTRING, Muscle.QUAD, Muscle.CORE)

        entry = pools.accessory_circuit(muscles, set())

        assert entry.name == EntryNames.ACCESSORY_CIRCUIT
        assert entry.circuit.warmup is False
        assert entry.circuit.rounds == 3
        assert entry.circuit.rest_seconds == 60
        for muscle, exercise in zip(muscles, entry.circuit.exercises):
            assert exercise.targets(muscle)

    def test_forearm_finisher(self, catalog, rng):
        """Test the finisher is a single forearm prescription of 10 to 12 reps."""
        pools = AccessoryAndWarmupPools(catalog, rng)

        entry = pools.forearm()

        assert entry.name == EntryNames.FOREARM_FINISHER
        assert entry.single.exercise.targets(Muscle.FOREARM)
        assert 10 <= entry.single.metric.reps <= 12
