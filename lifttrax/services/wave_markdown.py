"""Markdown rendering of generated waves."""

from __future__ import annotations

from lifttrax.models.enums import AccommodatingResistance, Weekday
from lifttrax.models.workout import CircuitPrescription, DayWorkout, SetPrescription, Wave


def _same_single(a: SetPrescription, b: SetPrescription) -> bool:
    return (
        a.exercise.key == b.exercise.key
        and a.metric == b.metric
        and a.percent == b.percent
        and a.rpe == b.rpe
        and a.accommodating_resistance == b.accommodating_resistance
    )


def describe_single(prescription: SetPrescription, count: int = 1) -> str:
    """One-line description, e.g. ``**Box Squat** 6x 3 reps @ 65% Chains``."""
    parts = [f"**{prescription.exercise.name}**"]
    if prescription.metric is not None:
        metric = prescription.metric.describe()
        parts.append(f"{count}x {metric}" if count > 1 else metric)
    elif count > 1:
        parts.append(f"{count}x")
    if prescription.percent is not None:
        parts.append(f"@ {prescription.percent}%")
    if prescription.rpe is not None:
        parts.append(f"RPE {prescription.rpe:g}")
    resistance = prescription.accommodating_resistance
    if resistance is not None and resistance != AccommodatingResistance.STRAIGHT:
        parts.append(resistance.value.title())
    return " ".join(parts)


def _circuit_lines(circuit: CircuitPrescription) -> list[str]:
    lines = [f"- Circuit: {circuit.rounds} rounds"]
    for number, prescription in enumerate(circuit.prescriptions, start=1):
        if circuit.warmup:
            description = f"**{prescription.exercise.name}**"
        else:
            description = describe_single(prescription, circuit.rounds)
        lines.append(f"  {number}. {description}")
        if prescription.exercise.notes:
            lines.append(f"     - Notes: {prescription.exercise.notes}")
    return lines


def render_day(workout: DayWorkout) -> list[str]:
    """Lines for one day; consecutive identical singles collapse into one line."""
    lines: list[str] = []
    entries = workout.entries
    i = 0
    while i < len(entries):
        entry = entries[i]
        lines.append(f"### {entry.name}")
        if entry.is_circuit:
            lines.extend(_circuit_lines(entry.circuit))
            i += 1
            continue

        single = entry.single
        count = 1
        while (
            i + count < len(entries)
            and not entries[i + count].is_circuit
            and _same_single(single, entries[i + count].single)
        ):
            count += 1
        lines.append(describe_single(single, count))
        if single.exercise.notes:
            lines.append(f"   - Notes: {single.exercise.notes}")
        i += count
    return lines


def render_wave_markdown(wave: Wave) -> list[str]:
    """Render ``wave`` as Markdown lines (``# Week 1``, ``## Monday``, ...)."""
    lines: list[str] = []
    for number, week in enumerate(wave, start=1):
        lines.append(f"# Week {number}")
        for day in Weekday:
            if day not in week:
                continue
            lines.append(f"## {day.display_name}")
            lines.extend(render_day(week[day]))
            lines.append("")
        lines.append("")
    return lines
