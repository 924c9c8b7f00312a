"""Declarative rule-set validation for JSON payloads.

A rule set is an ordered mapping of field name to ``Rule``. Fields are checked
in declaration order and each field reports at most one violation, so the first
entry of the result is the message the API returns.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# JSON kind names accepted by ``Rule.type``
_TYPE_CHECKS = {
    "string": lambda value: isinstance(value, str),
    "number": lambda value: isinstance(value, int | float) and not isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
}


@dataclass(frozen=True)
class Rule:
    """Validation rule for a single payload field.

    Attributes:
        optional: Field may be absent or null
        type: Expected JSON kind ("string", "number" or "boolean")
        min_length: Minimum string length
        max_length: Maximum string length
        enum: Allowed values
        min: Minimum numeric value
        integer: Numeric value must be integral
        pattern: Regular expression a string value must match
    """

    optional: bool = False
    type: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    enum: tuple[Any, ...] | None = None
    min: float | None = None
    integer: bool = False
    pattern: re.Pattern[str] | None = None

    def __post_init__(self) -> None:
        if self.type is not None and self.type not in _TYPE_CHECKS:
            raise ValueError(f"Unsupported rule type: {self.type}")


@dataclass(frozen=True)
class Violation:
    """A single failed rule, tied to a field name."""

    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating a payload against a rule set."""

    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def first(self) -> Violation | None:
        return self.violations[0] if self.violations else None

    @property
    def first_message(self) -> str | None:
        return self.violations[0].message if self.violations else None


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def is_integral(value: Any) -> bool:
    """Check for a JSON number with an integral value (``3`` and ``3.0`` both pass)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def check_field(name: str, value: Any, rule: Rule) -> str | None:
    """Check one value against its rule.

    Args:
        name: Field name used in the message
        value: Field value, None when absent
        rule: Rule to apply

    Returns:
        The violation message, or None if the value passes
    """
    if not rule.optional and _is_missing(value):
        return f"{name} is required"
    if value is None:
        return None

    if rule.type is not None and not _TYPE_CHECKS[rule.type](value):
        return f"{name} must be {rule.type}"
    if rule.min_length is not None and isinstance(value, str) and len(value) < rule.min_length:
        return f"{name} must have at least {rule.min_length} characters"
    if rule.max_length is not None and isinstance(value, str) and len(value) > rule.max_length:
        return f"{name} must have at most {rule.max_length} characters"
    if rule.enum is not None and value not in rule.enum:
        return f"{name} must be one of {', '.join(str(v) for v in rule.enum)}"
    if rule.min is not None and _TYPE_CHECKS["number"](value) and value < rule.min:
        return f"{name} must be >= {rule.min:g}"
    if rule.integer and not is_integral(value):
        return f"{name} must be an integer"
    if rule.pattern is not None and isinstance(value, str) and not rule.pattern.search(value):
        return f"{name} format is invalid"
    return None


def validate(payload: Mapping[str, Any], rules: Mapping[str, Rule]) -> ValidationResult:
    """Validate a payload against a rule set.

    Args:
        payload: Decoded JSON object
        rules: Ordered mapping of field name to rule

    Returns:
        ValidationResult with at most one violation per field, in rule order
    """
    result = ValidationResult()
    for name, rule in rules.items():
        message = check_field(name, payload.get(name), rule)
        if message is not None:
            result.violations.append(Violation(field=name, message=message))
    return result


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+\Z")

CONTACT_RULES: dict[str, Rule] = {
    "name": Rule(type="string", min_length=2),
    "email": Rule(type="string", pattern=EMAIL_PATTERN),
    "message": Rule(type="string", min_length=5),
}

ORDER_RULES: dict[str, Rule] = {
    "customer_name": Rule(type="string", optional=True),
}

RESERVATION_RULES: dict[str, Rule] = {
    "customer_name": Rule(type="string", min_length=2),
    "phone": Rule(type="string", optional=True),
    "table_no": Rule(type="number", integer=True, min=1),
    "reserved_at": Rule(type="string", min_length=10),
    "notes": Rule(type="string", optional=True),
}
