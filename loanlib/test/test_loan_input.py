"""Raw input validation and the legal rate cap."""

from datetime import date

import pytest
from pydantic import ValidationError

from loanlib.schema.legal_cap import check_nominal_rate_cap, max_nominal_rate_pct
from loanlib.schema.loan_input import (
    LoanInputError,
    RawLoanInput,
    field_errors_from_validation,
    parse_loan_input,
    validate_loan_input,
)

VALID = {
    "start_date": "2026-01-01",
    "principal": "10000",
    "nominal_rate_pct": "9.25",
    "commission_pct": 2,
    "installment_count": "60",
}


def test_valid_input_is_coerced():
    loan, errors = validate_loan_input(VALID)

    assert errors == {}
    assert loan.start_date == date(2026, 1, 1)
    assert loan.principal == 10000.0
    assert loan.nominal_rate_pct == 9.25
    assert loan.commission_pct == 2.0
    assert loan.installment_count == 60
    assert isinstance(loan.installment_count, int)


def test_camel_case_keys():
    loan, errors = validate_loan_input(
        {
            "startDate": "2026-01-01",
            "principal": 1000,
            "nominalInterestRatePct": 5,
            "commissionPct": 0,
            "numberOfInstallments": 12,
        }
    )
    assert errors == {}
    assert loan.installment_count == 12


def test_one_message_per_bad_field():
    loan, errors = validate_loan_input(
        {
            "start_date": "not a date",
            "principal": "-5",
            "nominal_rate_pct": "abc",
            "commission_pct": -1,
            "installment_count": 2.5,
        }
    )

    assert loan is None
    assert errors == {
        "start_date": "Start date must be a valid date",
        "principal": "Principal must be > 0",
        "nominal_rate_pct": "Nominal interest rate must be a number",
        "commission_pct": "Commission must be >= 0",
        "installment_count": "Number of installments must be an integer",
    }


def test_missing_fields():
    loan, errors = validate_loan_input({})
    assert loan is None
    assert errors["start_date"] == "Start date is required"
    assert set(errors) == {
        "start_date",
        "principal",
        "nominal_rate_pct",
        "commission_pct",
        "installment_count",
    }


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("principal", "inf", "Principal must be finite"),
        ("principal", 0, "Principal must be > 0"),
        ("installment_count", 0, "Number of installments must be >= 1"),
        ("installment_count", True, "Number of installments must be a number"),
        ("start_date", "   ", "Start date is required"),
    ],
)
def test_single_field_errors(field, value, message):
    raw = dict(VALID, **{field: value})
    loan, errors = validate_loan_input(raw)
    assert loan is None
    assert errors == {field: message}


def test_parse_raises_with_field_errors():
    with pytest.raises(LoanInputError) as exc_info:
        parse_loan_input(dict(VALID, principal="x"))
    assert exc_info.value.field_errors == {"principal": "Principal must be a number"}
    assert isinstance(exc_info.value, ValueError)


def test_parse_applies_legal_cap():
    assert parse_loan_input(VALID, reference_rate_pct=5.75).nominal_rate_pct == 9.25
    with pytest.raises(LoanInputError) as exc_info:
        parse_loan_input(dict(VALID, nominal_rate_pct=9.26), reference_rate_pct=5.75)
    assert exc_info.value.field_errors == {
        "nominal_rate_pct": "Nominal rate exceeds legal cap (9.25%)"
    }


def test_legal_cap():
    assert max_nominal_rate_pct(5.75) == pytest.approx(9.25)
    assert check_nominal_rate_cap(9.25, 5.75) == {}
    assert check_nominal_rate_cap(3.0, 5.75) == {}
    assert "nominal_rate_pct" in check_nominal_rate_cap(10.0, 5.75)


def test_raw_model_accepts_aliases_and_ignores_extra_keys():
    raw = RawLoanInput.model_validate(
        {
            "startDate": "20260101",
            "principal": "1500.50",
            "nominalRatePct": 7,
            "commissionPct": "0",
            "installmentCount": "24",
            "currency": "PLN",
        }
    )
    loan = raw.to_loan_input()
    assert loan.start_date == date(2026, 1, 1)
    assert loan.principal == 1500.5
    assert loan.installment_count == 24
    assert not hasattr(raw, "currency")


def test_raw_model_is_frozen():
    raw = RawLoanInput.model_validate(VALID)
    with pytest.raises(ValidationError):
        raw.principal = 1.0


def test_errors_reported_under_snake_case_names():
    with pytest.raises(ValidationError) as exc_info:
        RawLoanInput.model_validate(
            {
                "startDate": "2026-02-30",
                "principal": float("nan"),
                "nominalInterestRatePct": True,
                "commission_pct": 0,
                "numberOfInstallments": "twelve",
            }
        )
    assert field_errors_from_validation(exc_info.value) == {
        "start_date": "Start date must be a valid date",
        "principal": "Principal must be finite",
        "nominal_rate_pct": "Nominal interest rate must be a number",
        "installment_count": "Number of installments must be an integer",
    }


def test_none_value_is_not_a_number():
    loan, errors = validate_loan_input(dict(VALID, commission_pct=None))
    assert loan is None
    assert errors == {"commission_pct": "Commission must be a number"}
