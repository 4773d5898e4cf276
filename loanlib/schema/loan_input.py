"""
Typed construction of ``LoanInput`` from raw field values.

Raw values typically come from a form or a JSON payload: numbers may arrive as
strings and dates as ISO strings. ``RawLoanInput`` validates them with
pydantic; ``validate_loan_input`` turns a ``ValidationError`` into one message
per failing field (the first error reported for it) so a caller can show them
next to inputs.
"""

from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from loanlib.amortization.types import LoanInput
from loanlib.utils.date import to_date

from .legal_cap import check_nominal_rate_cap

FieldErrors = Dict[str, str]

LOAN_INPUT_FIELDS = (
    "start_date",
    "principal",
    "nominal_rate_pct",
    "commission_pct",
    "installment_count",
)

# camelCase keys used by JSON payloads
_ALIASES = {
    "startDate": "start_date",
    "nominalInterestRatePct": "nominal_rate_pct",
    "nominalRatePct": "nominal_rate_pct",
    "commissionPct": "commission_pct",
    "numberOfInstallments": "installment_count",
    "installmentCount": "installment_count",
}

_LABELS = {
    "start_date": "Start date",
    "principal": "Principal",
    "nominal_rate_pct": "Nominal interest rate",
    "commission_pct": "Commission",
    "installment_count": "Number of installments",
}

# Error types raised by the validators below; their message is already final
_CUSTOM_ERROR_TYPES = frozenset(["date_required", "date_invalid", "number_type"])


def _aliases(field: str) -> AliasChoices:
    return AliasChoices(field, *[k for k, v in _ALIASES.items() if v == field])


class RawLoanInput(BaseModel):
    """Loan terms as entered, before conversion to ``LoanInput``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start_date: date = Field(validation_alias=_aliases("start_date"))
    principal: float = Field(gt=0, allow_inf_nan=False, validation_alias=_aliases("principal"))
    nominal_rate_pct: float = Field(
        ge=0, allow_inf_nan=False, validation_alias=_aliases("nominal_rate_pct")
    )
    commission_pct: float = Field(
        ge=0, allow_inf_nan=False, validation_alias=_aliases("commission_pct")
    )
    installment_count: int = Field(ge=1, validation_alias=_aliases("installment_count"))

    @field_validator("start_date", mode="before")
    @classmethod
    def _parse_start_date(cls, value: Any) -> date:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("date_required", "Start date is required")
        try:
            return to_date(value)
        except (TypeError, ValueError):
            raise PydanticCustomError("date_invalid", "Start date must be a valid date") from None

    @field_validator(
        "principal", "nominal_rate_pct", "commission_pct", "installment_count", mode="before"
    )
    @classmethod
    def _reject_bool(cls, value: Any, info) -> Any:
        # pydantic would read True/False as 1/0
        if isinstance(value, bool):
            raise PydanticCustomError(
                "number_type", "{label} must be a number", {"label": _LABELS[info.field_name]}
            )
        return value

    def to_loan_input(self) -> LoanInput:
        return LoanInput(
            start_date=self.start_date,
            principal=self.principal,
            nominal_rate_pct=self.nominal_rate_pct,
            commission_pct=self.commission_pct,
            installment_count=self.installment_count,
        )


class LoanInputError(ValueError):
    """Raised when raw loan input fails validation.

    Attributes:
        field_errors: Message per failing field
    """

    def __init__(self, field_errors: FieldErrors):
        self.field_errors = dict(field_errors)
        detail = "; ".join(f"{k}: {v}" for k, v in self.field_errors.items())
        super().__init__(f"Invalid loan input: {detail}")


def _field_message(field: str, error: Mapping[str, Any]) -> str:
    """User-facing message for one pydantic error."""
    kind = error["type"]
    label = _LABELS.get(field, field)
    ctx = error.get("ctx") or {}

    if kind in _CUSTOM_ERROR_TYPES:
        return error["msg"]
    if kind == "missing":
        return f"{label} is required"
    if kind == "finite_number":
        return f"{label} must be finite"
    if kind == "greater_than":
        return f"{label} must be > {ctx['gt']}"
    if kind == "greater_than_equal":
        return f"{label} must be >= {ctx['ge']}"
    if kind in ("int_from_float", "int_parsing"):
        return f"{label} must be an integer"
    return f"{label} must be a number"


def field_errors_from_validation(exc: ValidationError) -> FieldErrors:
    """First error message per field, keyed by snake_case field name."""
    errors: FieldErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        field = _ALIASES.get(str(loc[0]), str(loc[0]))
        if field not in errors:
            errors[field] = _field_message(field, error)
    return errors


def validate_loan_input(raw: Mapping[str, Any]) -> Tuple[Optional[LoanInput], FieldErrors]:
    """
    Validate raw field values.

    Returns:
        (LoanInput, {}) when every field is valid, otherwise (None, field_errors)
    """
    try:
        parsed = RawLoanInput.model_validate(dict(raw))
    except ValidationError as exc:
        return None, field_errors_from_validation(exc)
    return parsed.to_loan_input(), {}


def parse_loan_input(
    raw: Mapping[str, Any], *, reference_rate_pct: Optional[float] = None
) -> LoanInput:
    """
    Build a ``LoanInput`` or raise ``LoanInputError``.

    When ``reference_rate_pct`` is given the nominal rate is also checked
    against the legal cap.
    """
    loan, errors = validate_loan_input(raw)
    if loan is None:
        raise LoanInputError(errors)
    if reference_rate_pct is not None:
        cap_errors = check_nominal_rate_cap(loan.nominal_rate_pct, reference_rate_pct)
        if cap_errors:
            raise LoanInputError(cap_errors)
    return loan
