# This project was developed with assistance from AI tools.
"""Mortgage payment schedule calculation.

Pure math, no I/O. Every step returns ``(value, error)`` so a failure is a
classified value the HTTP layer can map to a response, never an exception.
Amounts are carried as ``Decimal`` end to end.
"""

from decimal import ROUND_HALF_UP, Decimal

from ..schemas.calculator import (
    CalculationError,
    CalculationErrorKind,
    PaymentCalculation,
    PaymentScheduleRequest,
    Schedule,
)
from .validation import validate_request

MINIMUM_AMORTIZATION_PERIOD = 5
MAXIMUM_AMORTIZATION_PERIOD = 30

MINIMUM_DOWN_PAYMENT_PCT = Decimal("5")

# Lower bound of down payment % -> insurance rate %, highest bracket first
_INSURANCE_BRACKETS: list[tuple[Decimal, Decimal]] = [
    (Decimal("20"), Decimal("0")),
    (Decimal("15"), Decimal("2.8")),
    (Decimal("10"), Decimal("3.1")),
    (MINIMUM_DOWN_PAYMENT_PCT, Decimal("4.0")),
]

_PAYMENTS_PER_YEAR: dict[Schedule, int] = {
    Schedule.MONTHLY: 12,
    Schedule.BIWEEKLY: 26,
    # Interest accrues on a monthly basis; the monthly payment is split in two
    Schedule.ACCELERATED_BIWEEKLY: 12,
}

_CENTS = Decimal("0.01")
_ZERO = Decimal("0")

Result = tuple[Decimal, CalculationError | None]


def validate_amortization_period(years: int) -> CalculationError | None:
    """Period must be a 5-year step between 5 and 30 years inclusive."""
    if years % 5 != 0:
        return CalculationError.of(CalculationErrorKind.PERIOD_NOT_MULTIPLE_OF_FIVE)
    if years < MINIMUM_AMORTIZATION_PERIOD or years > MAXIMUM_AMORTIZATION_PERIOD:
        return CalculationError.of(CalculationErrorKind.PERIOD_OUT_OF_RANGE)
    return None


def mortgage_insurance_rate(property_price: Decimal, down_payment: Decimal) -> Result:
    """Insurance premium as a percentage of the amount borrowed.

    Brackets include their lower bound: 5-10% down pays 4.0%, 10-15% pays
    3.1%, 15-20% pays 2.8%, and 20% or more needs no insurance.
    """
    down_pct = down_payment * 100 / property_price
    if down_pct < MINIMUM_DOWN_PAYMENT_PCT:
        return _ZERO, CalculationError.of(CalculationErrorKind.DOWN_PAYMENT_TOO_LOW)
    for lower_bound, rate in _INSURANCE_BRACKETS:
        if down_pct >= lower_bound:
            break
    return rate, None


def mortgage_insurance(property_price: Decimal, down_payment: Decimal) -> Result:
    rate, error = mortgage_insurance_rate(property_price, down_payment)
    if error:
        return _ZERO, error
    return (property_price - down_payment) * rate / 100, None


def total_mortgage(property_price: Decimal, down_payment: Decimal) -> Result:
    """Principal: amount borrowed plus the insurance premium."""
    insurance, error = mortgage_insurance(property_price, down_payment)
    if error:
        return _ZERO, error
    return (property_price - down_payment) + insurance, None


def payments_per_year(schedule: str) -> tuple[int, CalculationError | None]:
    parsed = Schedule.parse(schedule)
    if parsed is None:
        return 0, CalculationError.of(CalculationErrorKind.INVALID_SCHEDULE)
    return _PAYMENTS_PER_YEAR[parsed], None


def total_number_of_payments(schedule: str, years: int) -> tuple[int, CalculationError | None]:
    per_year, error = payments_per_year(schedule)
    if error:
        return 0, error
    return per_year * years, None


def schedule_interest_rate(schedule: str, annual_interest_rate: Decimal) -> Result:
    """Annual percentage rate converted to a rate per payment period."""
    per_year, error = payments_per_year(schedule)
    if error:
        return _ZERO, error
    return annual_interest_rate / 100 / per_year, None


def amortized_payment(principal: Decimal, periodic_rate: Decimal, n_payments: int) -> Decimal:
    """Standard annuity payment: P * r(1+r)^n / ((1+r)^n - 1).

    A rate too small to move ``(1+r)^n`` at the working precision is
    treated as interest-free, so the principal is split evenly.
    """
    compound = (1 + periodic_rate) ** n_payments
    if compound == 1:
        return principal / n_payments
    return principal * periodic_rate * compound / (compound - 1)


def _failed(error: CalculationError) -> PaymentCalculation:
    return PaymentCalculation(amount=_ZERO, error=error)


def compute_payment_schedule(req: PaymentScheduleRequest) -> PaymentCalculation:
    """Compute the payment due each schedule period.

    Checks run in order and the first failure wins: field validation,
    amortization period, minimum down payment, then the schedule name.

    The result is rounded to cents. Accelerated biweekly halves the rounded
    monthly-basis payment without rounding again, so it can carry a third
    decimal digit (100000 / 5000 / 4.29% / 5y gives 916.255).
    """
    field_errors = validate_request(req)
    if field_errors:
        return _failed(CalculationError.invalid_fields(field_errors))

    error = validate_amortization_period(req.amortization_period)
    if error:
        return _failed(error)

    principal, error = total_mortgage(req.property_price, req.down_payment)
    if error:
        return _failed(error)

    periodic_rate, error = schedule_interest_rate(req.schedule, req.annual_interest_rate)
    if error:
        return _failed(error)

    n_payments, error = total_number_of_payments(req.schedule, req.amortization_period)
    if error:
        return _failed(error)

    payment = amortized_payment(principal, periodic_rate, n_payments)
    rounded = payment.quantize(_CENTS, rounding=ROUND_HALF_UP)

    if Schedule.parse(req.schedule) is Schedule.ACCELERATED_BIWEEKLY:
        return PaymentCalculation(amount=rounded / 2)
    return PaymentCalculation(amount=rounded)
