"""Input validation for calculator parameters.

The engine functions accept plain numbers and degrade to neutral results on
bad input. Callers that collect raw text (the CLI, forms) run it through
this module first and get a tagged result back: ``Valid`` carrying the
parsed value, or ``Invalid`` naming the offending field.

Parameter groups are pydantic models whose ``before`` validators reuse the
field-level parsers below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.debt import Debt
from ..models.growth import CompoundFrequency

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ValidationError(ValueError):
    """Raised when a caller wants invalid input to surface as an exception."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"{field_name}: {reason}")
        self.field = field_name
        self.reason = reason


@dataclass(slots=True, frozen=True)
class Valid(Generic[T]):
    value: T

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Invalid:
    field: str
    reason: str

    ok = False

    def unwrap(self):
        raise ValidationError(self.field, self.reason)

    def raise_(self) -> None:
        raise ValidationError(self.field, self.reason)


Result = Union[Valid[T], Invalid]


def parse_amount(
    raw: Any,
    field_name: str,
    *,
    allow_zero: bool = True,
    allow_negative: bool = False,
) -> Result[float]:
    """Parse a numeric input; blanks and non-numbers are invalid.

    Thousands separators, a leading ``$`` and a trailing ``%`` are accepted.
    """

    if raw is None:
        return Invalid(field_name, "is required")
    if isinstance(raw, bool):
        return Invalid(field_name, "must be a number")
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(",", "").lstrip("$").rstrip("%").strip()
        if not text:
            return Invalid(field_name, "is required")
        try:
            value = float(text)
        except ValueError:
            return Invalid(field_name, "must be a number")

    if value != value or value in (float("inf"), float("-inf")):
        return Invalid(field_name, "must be a finite number")
    if value < 0 and not allow_negative:
        return Invalid(field_name, "must not be negative")
    if value == 0 and not allow_zero:
        return Invalid(field_name, "must be greater than zero")
    return Valid(value)


def parse_whole(raw: Any, field_name: str, *, allow_zero: bool = False) -> Result[int]:
    """Parse a whole-number input such as a term in months."""

    parsed = parse_amount(raw, field_name, allow_zero=allow_zero)
    if not parsed.ok:
        return parsed
    if not float(parsed.value).is_integer():
        return Invalid(field_name, "must be a whole number")
    return Valid(int(parsed.value))


def parse_debt(spec: str) -> Result[Debt]:
    """Parse ``NAME:BALANCE:APR:MINIMUM`` into a ``Debt``."""

    parts = [part.strip() for part in (spec or "").split(":")]
    if len(parts) != 4 or not parts[0]:
        return Invalid("debt", f"expected NAME:BALANCE:APR:MINIMUM, got {spec!r}")

    name, *numbers = parts
    values: list[float] = []
    for label, raw in zip(("balance", "apr", "minimum"), numbers):
        parsed = parse_amount(raw, f"{name}.{label}", allow_zero=False)
        if not parsed.ok:
            return parsed
        values.append(parsed.value)
    return Valid(Debt(name=name, balance=values[0], annual_rate=values[1], minimum_payment=values[2]))


class LoanParams(BaseModel):
    """Validated inputs for a fixed-rate loan."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(description="Amount borrowed")
    annual_rate: float = Field(description="Nominal annual rate in percent")
    term_months: int = Field(description="Number of monthly payments")

    @field_validator("principal", mode="before")
    @classmethod
    def parse_principal(cls, value: Any) -> float:
        return parse_amount(value, "principal", allow_zero=False).unwrap()

    @field_validator("annual_rate", mode="before")
    @classmethod
    def parse_rate(cls, value: Any) -> float:
        return parse_amount(value, "annual_rate").unwrap()

    @field_validator("term_months", mode="before")
    @classmethod
    def parse_term(cls, value: Any) -> int:
        return parse_whole(value, "term_months").unwrap()


class GrowthParams(BaseModel):
    """Validated inputs for a compound growth projection."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(default=0.0, description="Starting lump sum")
    monthly_contribution: float = Field(default=0.0, description="Deposit made every month")
    annual_rate: float = Field(description="Nominal annual rate in percent")
    years: float = Field(description="Projection horizon")
    compounds_per_year: int = Field(
        default=int(CompoundFrequency.MONTHLY), description="Compounding periods per year"
    )

    @field_validator("principal", "monthly_contribution", "annual_rate", mode="before")
    @classmethod
    def parse_non_negative(cls, value: Any, info: pydantic.ValidationInfo) -> float:
        return parse_amount(value, info.field_name).unwrap()

    @field_validator("years", mode="before")
    @classmethod
    def parse_years(cls, value: Any) -> float:
        return parse_amount(value, "years", allow_zero=False).unwrap()

    @field_validator("compounds_per_year", mode="before")
    @classmethod
    def parse_frequency(cls, value: Any) -> int:
        try:
            return int(CompoundFrequency(int(value)))
        except (TypeError, ValueError):
            allowed = ", ".join(str(int(f)) for f in CompoundFrequency)
            raise ValueError(f"must be one of {allowed}") from None


class DebtParams(BaseModel):
    """A payable debt list plus the extra monthly budget."""

    debts: list[Debt] = Field(default_factory=list)
    extra_payment: float = Field(default=0.0, description="Extra budget applied each month")

    @field_validator("debts", mode="after")
    @classmethod
    def keep_payable(cls, value: list[Debt]) -> list[Debt]:
        """Drop debts the simulator would skip; at least one must remain."""

        if not value:
            raise ValueError("at least one debt is required")
        payable = [debt for debt in value if debt.is_payable]
        if not payable:
            raise ValueError("no debt has a positive balance, rate and minimum payment")
        return payable

    @field_validator("extra_payment", mode="before")
    @classmethod
    def parse_extra(cls, value: Any) -> float:
        if value is None or value == "":
            value = 0
        return parse_amount(value, "extra_payment").unwrap()


def _invalid_from(exc: pydantic.ValidationError) -> Invalid:
    """Collapse a pydantic error to the first offending field."""

    error = exc.errors(include_url=False)[0]
    loc = error.get("loc", ())
    field_name = str(loc[0]) if loc else "__root__"
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, ValidationError):
        return Invalid(cause.field, cause.reason)
    if cause is not None:
        return Invalid(field_name, str(cause))
    return Invalid(field_name, error.get("msg", "Invalid value"))


def _validate(model: type[M], payload: dict[str, Any]) -> Result[M]:
    try:
        return Valid(model.model_validate(payload))
    except pydantic.ValidationError as exc:
        return _invalid_from(exc)


def validate_debts(debts: Iterable[Debt], extra_payment: Any = 0) -> Result[DebtParams]:
    """Require at least one debt with positive balance, rate and minimum."""

    return _validate(DebtParams, {"debts": list(debts), "extra_payment": extra_payment})


def validate_loan(principal: Any, annual_rate: Any, term_months: Any) -> Result[LoanParams]:
    return _validate(
        LoanParams,
        {"principal": principal, "annual_rate": annual_rate, "term_months": term_months},
    )


def validate_growth(
    principal: Any,
    monthly_contribution: Any,
    annual_rate: Any,
    years: Any,
    compounds_per_year: Any = CompoundFrequency.MONTHLY,
) -> Result[GrowthParams]:
    return _validate(
        GrowthParams,
        {
            "principal": principal,
            "monthly_contribution": monthly_contribution,
            "annual_rate": annual_rate,
            "years": years,
            "compounds_per_year": compounds_per_year,
        },
    )


__all__ = [
    "DebtParams",
    "GrowthParams",
    "Invalid",
    "LoanParams",
    "Valid",
    "ValidationError",
    "parse_amount",
    "parse_debt",
    "parse_whole",
    "validate_debts",
    "validate_growth",
    "validate_loan",
]
