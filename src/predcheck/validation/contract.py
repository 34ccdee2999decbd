"""Declarative entity contracts and the field walk that interprets them.

An ``EntityContract`` lists the fields of one wire entity. ``validate`` checks
every field and raises a single ``ValidationError`` listing all missing and
wrongly-typed fields; ``validate_many`` applies it to each element of a list
and stops at the first bad element, reporting its index.

The caller's payload is never mutated. When no field needed decoding the same
object is returned; otherwise a shallow copy carrying the decoded values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

import structlog

from predcheck.errors import (
    CoercionFailure,
    IndexedElementError,
    InvalidType,
    MissingField,
    NestedEntityError,
    ValidationError,
    Violation,
)
from predcheck.models.enums import enum_values
from predcheck.validation.coercion import CoercionError, decode_json_array, decode_numeric
from predcheck.validation.formats import is_address
from predcheck.validation.predicates import (
    is_array,
    is_boolean,
    is_finite_number,
    is_plain_object,
    is_string,
    type_name,
)

log = structlog.get_logger(__name__)

_ABSENT = object()


class Kind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    ENUM = "enum"


_PREDICATES: dict[Kind, Callable[[Any], bool]] = {
    Kind.STRING: is_string,
    Kind.NUMBER: is_finite_number,
    Kind.BOOLEAN: is_boolean,
    Kind.ARRAY: is_array,
    Kind.OBJECT: is_plain_object,
}


@dataclass(frozen=True)
class FieldSpec:
    """One field of a contract."""

    name: str
    kind: Kind
    required: bool = True
    choices: type[Enum] | None = None
    items: Kind | None = None  # element kind of a scalar array
    contract: EntityContract | None = None  # element/object contract of a nested field
    deep: bool = False
    coerce: Callable[[Any], Any] | None = None
    check: Callable[[Any], bool] | None = None
    check_label: str = ""

    def optional(self) -> FieldSpec:
        return replace(self, required=False)


@dataclass(frozen=True)
class Conditional:
    """Extra required fields that apply when ``discriminator`` equals ``value``."""

    discriminator: str
    value: Enum
    fields: tuple[FieldSpec, ...]

    def applies(self, data: dict[str, Any]) -> bool:
        return data.get(self.discriminator) == self.value.value


class _Report:
    """Accumulates every defect found in one object."""

    def __init__(self) -> None:
        self.missing_fields: list[str] = []
        self.invalid_types: list[str] = []
        self.violations: list[Violation] = []

    def __bool__(self) -> bool:
        return bool(self.violations)

    def missing(self, field: str) -> None:
        self.missing_fields.append(field)
        self.violations.append(MissingField(field=field))

    def invalid(self, field: str, expected: str, received: str, text: str | None = None) -> None:
        self.invalid_types.append(text or f"{field} (expected {expected}, got {received})")
        self.violations.append(InvalidType(field=field, expected=expected, received=received))

    def coercion(self, field: str, reason: str) -> None:
        self.invalid_types.append(f"{field} ({reason})")
        self.violations.append(CoercionFailure(field=field, reason=reason))

    def nested(self, field: str, error: ValidationError) -> None:
        self.invalid_types.append(f"{field} is invalid: {error.message}")
        self.violations.append(
            NestedEntityError(field=field, message=error.message, violations=error.violations)
        )

    def element(self, field: str, index: int, error: ValidationError) -> None:
        self.invalid_types.append(f"{field} at index {index} is invalid: {error.message}")
        self.violations.append(
            IndexedElementError(
                index=index, field=field, message=error.message, violations=error.violations
            )
        )

    def details(self) -> dict[str, list[str]]:
        details: dict[str, list[str]] = {}
        if self.missing_fields:
            details["missingFields"] = self.missing_fields
        if self.invalid_types:
            details["invalidTypes"] = self.invalid_types
        return details


def _describe_choices(choices: type[Enum]) -> str:
    quoted = [f"'{v}'" for v in enum_values(choices)]
    if len(quoted) == 2:
        return f"{quoted[0]} or {quoted[1]}"
    return "one of " + ", ".join(quoted)


def _describe_value(value: Any) -> str:
    return f"'{value}'" if isinstance(value, str) else type_name(value)


@dataclass(frozen=True)
class EntityContract:
    name: str
    fields: tuple[FieldSpec, ...]
    plural: str | None = None
    conditionals: tuple[Conditional, ...] = ()
    at_least_one_of: tuple[str, ...] = ()

    @property
    def collection_name(self) -> str:
        return self.plural or f"{self.name}s"

    def active_fields(self, data: dict[str, Any]) -> Iterator[FieldSpec]:
        yield from self.fields
        for conditional in self.conditionals:
            if conditional.applies(data):
                yield from conditional.fields

    def validate(self, data: Any, *, deep: bool = False) -> Any:
        """Validate one object; ``deep`` recursively validates every nested contract."""
        if not is_plain_object(data):
            received = type_name(data)
            raise ValidationError(
                f"{self.name} data must be an object",
                {"received": received},
                [InvalidType(field=self.name, expected="object", received=received)],
            )
        report = _Report()
        decoded: dict[str, Any] = {}
        for spec in self.active_fields(data):
            self._check_field(spec, data, report, decoded, deep)
        if self.at_least_one_of and all(data.get(n) is None for n in self.at_least_one_of):
            report.missing("|".join(self.at_least_one_of))
        if report:
            log.debug(
                "validation_failed",
                entity=self.name,
                missing=len(report.missing_fields),
                invalid=len(report.invalid_types),
            )
            raise ValidationError(f"{self.name} validation failed", report.details(), report.violations)
        if decoded:
            return {**data, **decoded}
        return data

    def validate_many(self, data: Any, *, deep: bool = False) -> list[Any]:
        """Validate a list of objects, failing on the first invalid element."""
        if not is_array(data):
            received = type_name(data)
            raise ValidationError(
                f"{self.collection_name} data must be an array",
                {"received": received},
                [InvalidType(field=self.collection_name, expected="array", received=received)],
            )
        validated = []
        for index, item in enumerate(data):
            try:
                validated.append(self.validate(item, deep=deep))
            except ValidationError as exc:
                raise ValidationError(
                    f"{self.name} at index {index} is invalid: {exc.message}",
                    {"index": index, "originalError": exc.details},
                    [IndexedElementError(index=index, message=exc.message, violations=exc.violations)],
                ) from exc
        return validated

    def _check_field(
        self,
        spec: FieldSpec,
        data: dict[str, Any],
        report: _Report,
        decoded: dict[str, Any],
        deep: bool,
    ) -> None:
        value = data.get(spec.name, _ABSENT)
        if value is _ABSENT:
            if spec.required:
                report.missing(spec.name)
            return
        if value is None and not spec.required:
            return

        if spec.coerce is not None:
            try:
                coerced = spec.coerce(value)
            except CoercionError as exc:
                report.coercion(spec.name, str(exc))
                return
            if coerced is not value:
                decoded[spec.name] = value = coerced

        if spec.kind is Kind.ENUM:
            if not (is_string(value) and value in enum_values(spec.choices)):
                expected = _describe_choices(spec.choices)
                received = _describe_value(value)
                report.invalid(
                    spec.name,
                    expected,
                    received,
                    f"{spec.name} (expected {expected}, got {received})",
                )
            return

        if not _PREDICATES[spec.kind](value):
            report.invalid(spec.name, spec.kind.value, type_name(value))
            return
        if spec.check is not None and not spec.check(value):
            report.invalid(spec.name, spec.check_label, _describe_value(value))
            return
        if spec.items is not None:
            bad = next((item for item in value if not _PREDICATES[spec.items](item)), _ABSENT)
            if bad is not _ABSENT:
                report.invalid(
                    spec.name,
                    f"array of {spec.items.value}s",
                    f"array containing {type_name(bad)}",
                    f"{spec.name} (array must contain only {spec.items.value}s)",
                )
                return
        if spec.contract is not None and (deep or spec.deep):
            checked = self._check_nested(spec, value, report, deep)
            if checked is not value:
                decoded[spec.name] = checked

    @staticmethod
    def _check_nested(spec: FieldSpec, value: Any, report: _Report, deep: bool) -> Any:
        contract = spec.contract
        if spec.kind is Kind.OBJECT:
            try:
                return contract.validate(value, deep=deep)
            except ValidationError as exc:
                report.nested(spec.name, exc)
                return value
        checked = []
        for index, item in enumerate(value):
            try:
                checked.append(contract.validate(item, deep=deep))
            except ValidationError as exc:
                report.element(spec.name, index, exc)
                return value
        if any(new is not old for new, old in zip(checked, value)):
            return checked
        return value


# --- Field constructors used by the entity modules ---
def string(name: str, *, required: bool = True) -> FieldSpec:
    return FieldSpec(name, Kind.STRING, required=required)


def strings(*names: str, required: bool = True) -> tuple[FieldSpec, ...]:
    return tuple(string(n, required=required) for n in names)


def number(name: str, *, required: bool = True, coerce_string: bool = False) -> FieldSpec:
    """Finite number; with ``coerce_string`` a numeric string such as "42" is decoded."""
    return FieldSpec(
        name,
        Kind.NUMBER,
        required=required,
        coerce=decode_numeric if coerce_string else None,
    )


def numbers(*names: str, required: bool = True) -> tuple[FieldSpec, ...]:
    return tuple(number(n, required=required) for n in names)


def boolean(name: str, *, required: bool = True) -> FieldSpec:
    return FieldSpec(name, Kind.BOOLEAN, required=required)


def booleans(*names: str, required: bool = True) -> tuple[FieldSpec, ...]:
    return tuple(boolean(n, required=required) for n in names)


def enum(name: str, choices: type[Enum], *, required: bool = True) -> FieldSpec:
    return FieldSpec(name, Kind.ENUM, required=required, choices=choices)


def address(name: str, *, required: bool = True) -> FieldSpec:
    return FieldSpec(
        name,
        Kind.STRING,
        required=required,
        check=is_address,
        check_label="0x-prefixed 40-hex address",
    )


def array(
    name: str,
    *,
    items: Kind | None = None,
    contract: EntityContract | None = None,
    deep: bool = False,
    json_string: bool = False,
    required: bool = True,
) -> FieldSpec:
    """Array field; ``json_string`` accepts a JSON-encoded string and decodes it first."""
    return FieldSpec(
        name,
        Kind.ARRAY,
        required=required,
        items=items,
        contract=contract,
        deep=deep,
        coerce=decode_json_array if json_string else None,
    )


def nested(
    name: str,
    contract: EntityContract,
    *,
    deep: bool = True,
    required: bool = True,
) -> FieldSpec:
    return FieldSpec(name, Kind.OBJECT, required=required, contract=contract, deep=deep)
