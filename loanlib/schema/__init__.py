from .legal_cap import MAX_RATE_MARGIN_PCT, check_nominal_rate_cap, max_nominal_rate_pct
from .loan_input import (
    LOAN_INPUT_FIELDS,
    FieldErrors,
    LoanInputError,
    RawLoanInput,
    field_errors_from_validation,
    parse_loan_input,
    validate_loan_input,
)

__all__ = [
    "LOAN_INPUT_FIELDS",
    "FieldErrors",
    "LoanInputError",
    "RawLoanInput",
    "field_errors_from_validation",
    "validate_loan_input",
    "parse_loan_input",
    "MAX_RATE_MARGIN_PCT",
    "max_nominal_rate_pct",
    "check_nominal_rate_cap",
]
