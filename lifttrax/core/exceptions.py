"""Domain exception hierarchy.

Exception Hierarchy:
- DomainError (base, carries code/message/details)
  - NotFoundError (catalog lookups)
  - ValidationError (bad input, unreadable catalog files)
  - ConflictError (ambiguous or duplicate catalog entries)
  - BusinessRuleError
    - GenerationError (terminal for a generate_wave call)
      - InsufficientVarietyError (too few distinct entries for a pattern/muscle)
      - MissingCanonicalExerciseError (speed-work default cannot be found)
      - EmptyRequiredPoolError (mandatory warm-up/conditioning pool is empty)

Example:
    try:
        wave = generate_wave(6, catalog)
    except InsufficientVarietyError as e:
        logger.error("catalog too small", subject=e.details["subject"])
    except GenerationError as e:
        logger.error("generation failed", code=e.code)
"""


class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        code = f"NF_{entity.upper()}_001"
        msg = message or f"{entity} not found"
        super().__init__(code, msg, details)


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, details: dict | None = None):
        code = f"VAL_{field.upper()}_001"
        msg = f"Validation failed for {field}: {message}"
        super().__init__(code, msg, details or {"field": field})


class BusinessRuleError(DomainError):
    def __init__(self, message: str, code: str = "BR_001", details: dict | None = None):
        super().__init__(code, message, details)


class ConflictError(DomainError):
    def __init__(self, message: str, code: str = "CF_001", details: dict | None = None):
        super().__init__(code, message, details)


# =============================================================================
# Wave generation
# =============================================================================

def _code_suffix(value: str) -> str:
    return value.upper().replace(" ", "_").replace("-", "_")


class GenerationError(BusinessRuleError):
    """Base class for failures that abort a wave-generation call.

    No partial wave is ever returned; the caller fixes the catalog and
    calls again.
    """


class InsufficientVarietyError(GenerationError):
    """A catalog class has fewer distinct entries than the wave requires.

    ``subject`` names the pattern or muscle, e.g. ``"squat"`` or ``"hamstring"``.
    """

    def __init__(self, subject: str, required: int, available: int):
        super().__init__(
            f"insufficient variety for {subject}: need {required}, found {available}",
            code=f"GEN_VARIETY_{_code_suffix(subject)}",
            details={"subject": subject, "required": required, "available": available},
        )
        self.subject = subject
        self.required = required
        self.available = available


class MissingCanonicalExerciseError(GenerationError):
    """A pattern's named default ("Squat", "Bench Press", ...) is not in the catalog."""

    def __init__(self, pattern: str, name: str):
        super().__init__(
            f"no catalog entry for canonical {pattern} exercise '{name}'",
            code=f"GEN_CANONICAL_{_code_suffix(pattern)}",
            details={"pattern": pattern, "name": name},
        )
        self.pattern = pattern
        self.name = name


class EmptyRequiredPoolError(GenerationError):
    """A mandatory warm-up, mobility or conditioning pool has no entries."""

    def __init__(self, pool: str):
        super().__init__(
            f"no catalog entries available for required {pool} pool",
            code=f"GEN_POOL_{_code_suffix(pool)}",
            details={"pool": pool},
        )
        self.pool = pool
