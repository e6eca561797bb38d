"""Override boundary for generated lift selections.

Before a wave is assembled the generator hands its default choices (the
per-week max-effort lifts and the per-pattern speed-work lifts) to a
``SelectionResolver``. A resolver may substitute any legal alternative for a
slot but never changes the number of slots. Headless environments use
``DefaultSelectionResolver``, which keeps every default.

Resolution is fail-soft: a resolver that raises, returns the wrong number of
selections, or picks something outside a slot's alternatives never aborts
generation; the defaults are used instead.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from lifttrax.core.logging import get_logger
from lifttrax.models.exercise import Exercise

logger = get_logger(__name__)


@runtime_checkable
class SelectionResolver(Protocol):
    """Synchronous strategy that may replace default selections.

    Args:
        defaults: One default exercise per slot
        alternatives: Legal options per slot, same length as ``defaults``
        labels: Human-readable slot names ("Week 1 lower", "Squat", ...)

    Returns:
        One exercise per slot
    """

    def resolve(
        self,
        defaults: Sequence[Exercise],
        alternatives: Sequence[Sequence[Exercise]],
        labels: Sequence[str] | None = None,
    ) -> list[Exercise]:
        ...


class DefaultSelectionResolver:
    """Keeps every default unchanged."""

    def resolve(
        self,
        defaults: Sequence[Exercise],
        alternatives: Sequence[Sequence[Exercise]],
        labels: Sequence[str] | None = None,
    ) -> list[Exercise]:
        return list(defaults)


def resolve_selections(
    resolver: SelectionResolver | None,
    defaults: Sequence[Exercise],
    alternatives: Sequence[Sequence[Exercise]],
    labels: Sequence[str],
    purpose: str,
) -> list[Exercise]:
    """Run ``resolver`` and validate its answer slot by slot.

    Args:
        resolver: Strategy to consult; ``None`` keeps the defaults
        defaults: Computed default per slot
        alternatives: Legal options per slot
        labels: Slot names passed through to the resolver
        purpose: Short tag for log entries ("main_lifts", "speed_work")

    Returns:
        Final selection per slot
    """
    defaults = list(defaults)
    if resolver is None:
        return defaults

    try:
        chosen = list(resolver.resolve(defaults, alternatives, labels))
    except Exception:
        logger.warning("selection_override_failed", purpose=purpose, exc_info=True)
        return defaults

    if len(chosen) != len(defaults):
        logger.warning(
            "selection_override_slot_mismatch",
            purpose=purpose,
            expected=len(defaults),
            received=len(chosen),
        )
        return defaults

    final: list[Exercise] = []
    for label, default, options, choice in zip(labels, defaults, alternatives, chosen):
        by_key = {option.key: option for option in options}
        if isinstance(choice, Exercise) and choice.key in by_key:
            final.append(by_key[choice.key])
        else:
            logger.warning(
                "selection_override_rejected",
                purpose=purpose,
                slot=label,
                choice=getattr(choice, "name", repr(choice)),
            )
            final.append(default)

    changed = sum(1 for default, selected in zip(defaults, final) if default.key != selected.key)
    if changed:
        logger.info("selection_overridden", purpose=purpose, slots_changed=changed)
    return final
