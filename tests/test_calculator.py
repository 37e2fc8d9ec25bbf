# This project was developed with assistance from AI tools.
"""Tests for the payment schedule calculator."""

from decimal import Decimal

import pytest

from mortgage_api.schemas.calculator import CalculationErrorKind, PaymentScheduleRequest
from mortgage_api.services.calculator import (
    compute_payment_schedule,
    mortgage_insurance,
    mortgage_insurance_rate,
    payments_per_year,
    schedule_interest_rate,
    total_mortgage,
    total_number_of_payments,
    validate_amortization_period,
)


def _request(**overrides) -> PaymentScheduleRequest:
    fields = {
        "property_price": Decimal("100000"),
        "down_payment": Decimal("5000"),
        "annual_interest_rate": Decimal("4.29"),
        "amortization_period": 5,
        "schedule": "MONTHLY",
    }
    fields.update(overrides)
    return PaymentScheduleRequest(**fields)


class TestAmortizationPeriod:
    @pytest.mark.parametrize("years", [5, 10, 25, 30])
    def test_accepts_five_year_steps_in_range(self, years):
        assert validate_amortization_period(years) is None

    @pytest.mark.parametrize("years", [1, 6, 29, 31, 99])
    def test_rejects_non_multiple_of_five(self, years):
        error = validate_amortization_period(years)
        assert error.kind is CalculationErrorKind.PERIOD_NOT_MULTIPLE_OF_FIVE

    @pytest.mark.parametrize("years", [0, 35, 80])
    def test_rejects_out_of_range(self, years):
        error = validate_amortization_period(years)
        assert error.kind is CalculationErrorKind.PERIOD_OUT_OF_RANGE
        assert error.message == "amortization period out of range"


class TestMortgageInsuranceRate:
    @pytest.mark.parametrize(
        "down_payment,expected",
        [
            ("5000", "4.0"),
            ("6000", "4.0"),
            ("9999.99", "4.0"),
            ("10000", "3.1"),
            ("11000", "3.1"),
            ("14999.99", "3.1"),
            ("15000", "2.8"),
            ("16000", "2.8"),
            ("19999.99", "2.8"),
            ("20000", "0"),
            ("210000", "0"),
        ],
    )
    def test_brackets(self, down_payment, expected):
        rate, error = mortgage_insurance_rate(Decimal("100000"), Decimal(down_payment))
        assert error is None
        assert rate == Decimal(expected)

    def test_down_payment_below_five_percent(self):
        rate, error = mortgage_insurance_rate(Decimal("100000"), Decimal("0"))
        assert rate == 0
        assert error.kind is CalculationErrorKind.DOWN_PAYMENT_TOO_LOW
        assert error.message == "down payment is lower than the minimum 5% of the property price"

    def test_rate_never_increases_with_larger_down_payment(self):
        price = Decimal("100000")
        rates = [
            mortgage_insurance_rate(price, Decimal(down))[0]
            for down in range(5000, 100000, 250)
        ]
        assert all(later <= earlier for earlier, later in zip(rates, rates[1:]))


class TestTotalMortgage:
    def test_insurance_added_when_needed(self):
        insurance, error = mortgage_insurance(Decimal("123456"), Decimal("12223"))
        assert error is None
        assert insurance == Decimal("4449.32")

        total, error = total_mortgage(Decimal("123456"), Decimal("12223"))
        assert error is None
        assert total == Decimal("115682.32")

    @pytest.mark.parametrize(
        "price,down",
        [("100000", "21000"), ("100000", "20000"), ("350000", "90000"), ("1", "0.5")],
    )
    def test_no_insurance_at_twenty_percent_or_more(self, price, down):
        price, down = Decimal(price), Decimal(down)
        insurance, _ = mortgage_insurance(price, down)
        total, error = total_mortgage(price, down)
        assert error is None
        assert insurance == 0
        assert total == price - down

    def test_down_payment_too_low(self):
        total, error = total_mortgage(Decimal("100000"), Decimal("1000"))
        assert total == 0
        assert error.kind is CalculationErrorKind.DOWN_PAYMENT_TOO_LOW


class TestScheduleParameters:
    @pytest.mark.parametrize(
        "schedule,per_year",
        [
            ("MONTHLY", 12),
            ("BIWEEKLY", 26),
            ("ACCELERATEDBIWEEKLY", 12),
            ("monthly", 12),
            ("AcceleratedBiweekly", 12),
        ],
    )
    def test_payments_per_year(self, schedule, per_year):
        assert payments_per_year(schedule) == (per_year, None)
        assert total_number_of_payments(schedule, 5) == (per_year * 5, None)

    def test_schedule_interest_rate(self):
        rate, error = schedule_interest_rate("BIWEEKLY", Decimal("5.2"))
        assert error is None
        assert rate == Decimal("0.002")

    def test_unknown_schedule(self):
        n, error = total_number_of_payments("Yearly", 5)
        assert n == 0
        assert error.kind is CalculationErrorKind.INVALID_SCHEDULE

        rate, error = schedule_interest_rate("Yearly", Decimal("4.29"))
        assert rate == 0
        assert error.kind is CalculationErrorKind.INVALID_SCHEDULE


class TestComputePaymentSchedule:
    @pytest.mark.parametrize(
        "schedule,expected",
        [
            ("MONTHLY", "1832.51"),
            ("BIWEEKLY", "845.05"),
            ("ACCELERATEDBIWEEKLY", "916.255"),
        ],
    )
    def test_reference_quotes(self, schedule, expected):
        result = compute_payment_schedule(_request(schedule=schedule))
        assert result.ok
        assert result.amount == Decimal(expected)

    def test_schedule_is_case_insensitive(self):
        result = compute_payment_schedule(_request(schedule="monthly"))
        assert result.amount == Decimal("1832.51")

    def test_accelerated_biweekly_is_halved_after_rounding(self):
        """Halving the rounded monthly payment keeps a third decimal digit."""
        monthly = compute_payment_schedule(_request(schedule="MONTHLY")).amount
        accelerated = compute_payment_schedule(_request(schedule="ACCELERATEDBIWEEKLY")).amount
        assert accelerated == monthly / 2
        assert accelerated.as_tuple().exponent == -3

    def test_missing_schedule_is_a_field_error(self):
        result = compute_payment_schedule(_request(schedule=None))
        assert result.amount == 0
        assert result.error.kind is CalculationErrorKind.FIELD_VALIDATION
        assert result.error.message == "data validation error"
        field_error = result.error.fields[0]
        assert field_error.field == "schedule"
        assert field_error.error == "schedule is a required field"

    def test_field_errors_are_collected(self):
        result = compute_payment_schedule(PaymentScheduleRequest())
        assert [fe.field for fe in result.error.fields] == [
            "propertyPrice",
            "downPayment",
            "annualInterestRate",
            "amortizationPeriod",
            "schedule",
        ]

    def test_period_out_of_range(self):
        result = compute_payment_schedule(_request(amortization_period=80, schedule="BIWEEKLY"))
        assert result.error.kind is CalculationErrorKind.PERIOD_OUT_OF_RANGE

    @pytest.mark.parametrize("years", [1, 6, 33])
    def test_period_step_checked_before_other_rules(self, years):
        """Down payment and schedule problems are never reported first."""
        result = compute_payment_schedule(
            _request(amortization_period=years, down_payment=Decimal("10"), schedule="yearly")
        )
        assert result.error.kind is CalculationErrorKind.PERIOD_NOT_MULTIPLE_OF_FIVE

    def test_zero_down_payment_is_too_low(self):
        result = compute_payment_schedule(_request(down_payment=Decimal("0")))
        assert result.amount == 0
        assert result.error.kind is CalculationErrorKind.DOWN_PAYMENT_TOO_LOW

    def test_unsupported_schedule(self):
        result = compute_payment_schedule(_request(schedule="yearly"))
        assert result.error.kind is CalculationErrorKind.INVALID_SCHEDULE

    @pytest.mark.parametrize("years", [5, 30])
    def test_period_bounds_are_inclusive(self, years):
        assert compute_payment_schedule(_request(amortization_period=years)).ok

    def test_negligible_rate_splits_principal_evenly(self):
        result = compute_payment_schedule(
            _request(down_payment=Decimal("20000"), annual_interest_rate=Decimal("1e-30"))
        )
        assert result.ok
        assert result.amount == Decimal("1333.33")

    def test_oversized_price_is_a_field_error(self):
        result = compute_payment_schedule(
            _request(property_price=Decimal("1e308"), down_payment=Decimal("1e307"))
        )
        assert result.error.kind is CalculationErrorKind.FIELD_VALIDATION
        assert [fe.field for fe in result.error.fields] == ["propertyPrice"]

    def test_oversized_rate_is_a_field_error(self):
        result = compute_payment_schedule(_request(annual_interest_rate=Decimal("1e6")))
        assert result.error.kind is CalculationErrorKind.FIELD_VALIDATION
        assert [fe.field for fe in result.error.fields] == ["annualInterestRate"]

    @pytest.mark.parametrize("schedule", ["MONTHLY", "BIWEEKLY", "ACCELERATEDBIWEEKLY"])
    def test_largest_accepted_inputs_compute(self, schedule):
        result = compute_payment_schedule(
            _request(
                property_price=Decimal("1000000000"),
                down_payment=Decimal("50000000"),
                annual_interest_rate=Decimal("100"),
                amortization_period=30,
                schedule=schedule,
            )
        )
        assert result.ok
        assert result.amount > 0

    def test_same_input_same_output(self):
        req = _request(schedule="BIWEEKLY")
        assert compute_payment_schedule(req) == compute_payment_schedule(req)
