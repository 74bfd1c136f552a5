"""
Declarative request schemas for the validation pipeline.

A RequestSchema maps field names to field specs. Each field spec coerces
its value to the field type and then runs every rule in order, so a single
pass reports all problems of all fields. The optional Pydantic model turns
the stripped, validated data into a typed object.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel


@dataclass(frozen=True)
class ValidationIssue:
    """A single failing field."""

    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}


def is_absent(value: Any) -> bool:
    return value is None


class Rule:
    """Base rule. Rules are skipped for absent values unless ``skip_absent`` is False."""

    skip_absent = True

    def __init__(self, message: str):
        self.message = message

    def check(self, value: Any) -> bool:
        raise NotImplementedError


class Required(Rule):
    skip_absent = False

    def check(self, value: Any) -> bool:
        return not is_absent(value) and value != ""


class MinLength(Rule):
    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: Any) -> bool:
        return len(value) >= self.limit


class MaxLength(Rule):
    def __init__(self, limit: int, message: str):
        super().__init__(message)
        self.limit = limit

    def check(self, value: Any) -> bool:
        return len(value) <= self.limit


class Pattern(Rule):
    """The whole value must match ``regex``."""

    def __init__(self, regex: str, message: str, flags: int = 0):
        super().__init__(message)
        self.regex = re.compile(regex, flags)

    def check(self, value: Any) -> bool:
        return self.regex.fullmatch(value) is not None


class Range(Rule):
    def __init__(
        self,
        message: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ):
        super().__init__(message)
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value: Any) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True


class Predicate(Rule):
    """Custom check, e.g. ``Predicate(lambda v: v != 'admin', 'Name is reserved')``."""

    def __init__(self, check: Callable[[Any], bool], message: str):
        super().__init__(message)
        self._check = check

    def check(self, value: Any) -> bool:
        return bool(self._check(value))


class FieldSpec:
    """Untyped field: values pass through coercion unchanged."""

    type_name = "mixed"

    def __init__(self, *rules: Rule, type_message: Optional[str] = None):
        self.rules: Tuple[Rule, ...] = rules
        self.type_message = type_message

    def coerce(self, value: Any) -> Any:
        return value

    def validate(self, path: str, value: Any) -> Tuple[Any, List[ValidationIssue]]:
        """Coerce and check a value, returning every failing rule."""
        if not is_absent(value):
            try:
                value = self.coerce(value)
            except (TypeError, ValueError):
                message = self.type_message or f"{path} must be a `{self.type_name}` type"
                return value, [ValidationIssue(path=path, message=message)]

        issues = []
        for rule in self.rules:
            if rule.skip_absent and is_absent(value):
                continue
            if not rule.check(value):
                issues.append(ValidationIssue(path=path, message=rule.message))
        return value, issues


class StringField(FieldSpec):
    """String field. Numbers and booleans are cast to their JSON text."""

    type_name = "string"

    def coerce(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        raise TypeError(f"cannot cast {type(value).__name__} to string")


class NumberField(FieldSpec):
    """Numeric field. Numeric strings are parsed."""

    type_name = "number"

    def coerce(self, value: Any) -> float:
        if isinstance(value, bool):
            raise TypeError("booleans are not numbers")
        if isinstance(value, (int, float)):
            number = value
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            raise TypeError(f"cannot cast {type(value).__name__} to number")
        if number != number:
            raise ValueError("NaN is not a number")
        return number


@dataclass(frozen=True)
class RequestSchema:
    """Field specs in evaluation order, plus the model built from valid data."""

    fields: Mapping[str, FieldSpec]
    model: Optional[Type[BaseModel]] = None
