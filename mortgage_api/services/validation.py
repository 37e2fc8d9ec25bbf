# This project was developed with assistance from AI tools.
"""Structural validation for payment schedule requests.

One validator per field. Each returns the problems found for that field as
``FieldError`` entries named by the field's JSON key, so the handler can
echo them back unchanged. Business rules (period steps, minimum down
payment) are not checked here; see ``services.calculator``.
"""

from collections.abc import Callable
from decimal import Decimal

from ..schemas.calculator import FieldError, PaymentScheduleRequest

MAXIMUM_PROPERTY_PRICE = Decimal("1000000000")
MAXIMUM_ANNUAL_INTEREST_RATE = Decimal("100")


def _required(field: str) -> FieldError:
    return FieldError(field=field, error=f"{field} is a required field")


def validate_property_price(req: PaymentScheduleRequest) -> list[FieldError]:
    """Property price is required and bounded, and must exceed the down payment."""
    if req.property_price is None:
        return [_required("propertyPrice")]
    if req.property_price <= 0:
        return [FieldError(field="propertyPrice", error="propertyPrice must be greater than 0")]
    if req.property_price > MAXIMUM_PROPERTY_PRICE:
        return [
            FieldError(
                field="propertyPrice",
                error=f"propertyPrice must be {MAXIMUM_PROPERTY_PRICE} or less",
            )
        ]
    if req.down_payment is not None and req.property_price <= req.down_payment:
        return [
            FieldError(
                field="propertyPrice",
                error="propertyPrice must be greater than downPayment",
            )
        ]
    return []


def validate_down_payment(req: PaymentScheduleRequest) -> list[FieldError]:
    """Down payment may be zero but never negative or above the price."""
    if req.down_payment is None:
        return [_required("downPayment")]
    if req.down_payment < 0:
        return [FieldError(field="downPayment", error="downPayment must be 0 or greater")]
    if req.property_price is not None and req.down_payment >= req.property_price:
        return [
            FieldError(field="downPayment", error="downPayment must be less than propertyPrice")
        ]
    return []


def validate_annual_interest_rate(req: PaymentScheduleRequest) -> list[FieldError]:
    if req.annual_interest_rate is None:
        return [_required("annualInterestRate")]
    if req.annual_interest_rate <= 0:
        return [
            FieldError(
                field="annualInterestRate",
                error="annualInterestRate must be greater than 0",
            )
        ]
    if req.annual_interest_rate > MAXIMUM_ANNUAL_INTEREST_RATE:
        return [
            FieldError(
                field="annualInterestRate",
                error=f"annualInterestRate must be {MAXIMUM_ANNUAL_INTEREST_RATE} or less",
            )
        ]
    return []


def validate_amortization_period(req: PaymentScheduleRequest) -> list[FieldError]:
    if req.amortization_period is None:
        return [_required("amortizationPeriod")]
    if req.amortization_period <= 0:
        return [
            FieldError(
                field="amortizationPeriod",
                error="amortizationPeriod must be greater than 0",
            )
        ]
    return []


def validate_schedule(req: PaymentScheduleRequest) -> list[FieldError]:
    """Only presence is checked; unknown names are a calculator error."""
    if req.schedule is None or not req.schedule.strip():
        return [_required("schedule")]
    return []


# Ordered as the fields appear in the request body
_VALIDATORS: list[Callable[[PaymentScheduleRequest], list[FieldError]]] = [
    validate_property_price,
    validate_down_payment,
    validate_annual_interest_rate,
    validate_amortization_period,
    validate_schedule,
]


def validate_request(req: PaymentScheduleRequest) -> list[FieldError]:
    """Run every field validator and collect all problems found.

    Returns an empty list when the request is structurally sound.
    """
    errors: list[FieldError] = []
    for validator in _VALIDATORS:
        errors.extend(validator(req))
    return errors
