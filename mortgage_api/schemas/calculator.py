# This project was developed with assistance from AI tools.
"""Payment schedule calculator schemas."""

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class Schedule(str, enum.Enum):
    MONTHLY = "MONTHLY"
    BIWEEKLY = "BIWEEKLY"
    ACCELERATED_BIWEEKLY = "ACCELERATEDBIWEEKLY"

    @classmethod
    def parse(cls, value: str) -> "Schedule | None":
        """Match a schedule name case-insensitively. None when unknown."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class PaymentScheduleRequest(BaseModel):
    """Loan parameters for a payment schedule quote.

    Every field is optional at decode time; presence and ranges are checked
    by ``services.validation`` so missing fields surface as field errors
    instead of decode failures.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    property_price: Decimal | None = None
    down_payment: Decimal | None = None
    annual_interest_rate: Decimal | None = None
    amortization_period: StrictInt | None = None
    schedule: str | None = None


class PaymentScheduleResponse(BaseModel):
    """Payment due per schedule period."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    payment_per_schedule: float


class FieldError(BaseModel):
    """A problem with a single request field."""

    field: str
    error: str


def field_messages(errors: list[FieldError]) -> dict[str, str]:
    """Map each offending field to its message."""
    return {fe.field: fe.error for fe in errors}


class CalculationErrorKind(str, enum.Enum):
    FIELD_VALIDATION = "field_validation"
    DOWN_PAYMENT_TOO_LOW = "down_payment_too_low"
    PERIOD_OUT_OF_RANGE = "period_out_of_range"
    PERIOD_NOT_MULTIPLE_OF_FIVE = "period_not_multiple_of_five"
    INVALID_SCHEDULE = "invalid_schedule"

    @classmethod
    def rule_violations(cls) -> frozenset["CalculationErrorKind"]:
        """Business-rule kinds answered with a 400 and a single message."""
        return frozenset(
            {cls.DOWN_PAYMENT_TOO_LOW, cls.PERIOD_OUT_OF_RANGE, cls.PERIOD_NOT_MULTIPLE_OF_FIVE}
        )


ERROR_MESSAGES: dict[CalculationErrorKind, str] = {
    CalculationErrorKind.FIELD_VALIDATION: "data validation error",
    CalculationErrorKind.DOWN_PAYMENT_TOO_LOW: (
        "down payment is lower than the minimum 5% of the property price"
    ),
    CalculationErrorKind.PERIOD_OUT_OF_RANGE: "amortization period out of range",
    CalculationErrorKind.PERIOD_NOT_MULTIPLE_OF_FIVE: (
        "amortization period must be a 5 years multiple"
    ),
    CalculationErrorKind.INVALID_SCHEDULE: "amortization schedule not supported",
}


class CalculationError(BaseModel):
    """Classified calculator failure.

    ``fields`` is only populated for ``FIELD_VALIDATION``.
    """

    model_config = ConfigDict(frozen=True)

    kind: CalculationErrorKind
    message: str
    fields: list[FieldError] = Field(default_factory=list)

    @classmethod
    def of(cls, kind: CalculationErrorKind) -> "CalculationError":
        return cls(kind=kind, message=ERROR_MESSAGES[kind])

    @classmethod
    def invalid_fields(cls, fields: list[FieldError]) -> "CalculationError":
        return cls(
            kind=CalculationErrorKind.FIELD_VALIDATION,
            message=ERROR_MESSAGES[CalculationErrorKind.FIELD_VALIDATION],
            fields=fields,
        )


class PaymentCalculation(BaseModel):
    """Calculator outcome: an amount, or a classified error with amount 0."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Decimal("0")
    error: CalculationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
