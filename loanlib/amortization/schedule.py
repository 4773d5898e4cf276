"""Schedule entry point selecting the amortization algorithm."""

from typing import List, Optional, Union

from loanlib.conventions.calendars import HolidaysLike
from loanlib.conventions.types import AmortizationMethod

from .annuity import compute_annuity_schedule
from .closed_form import compute_closed_form_schedule
from .types import LoanInput, ScheduleRow


def compute_schedule(
    loan: LoanInput,
    *,
    method: Union[AmortizationMethod, str] = AmortizationMethod.DAY_COUNT,
    holiday_predicate: Optional[HolidaysLike] = None,
) -> List[ScheduleRow]:
    """
    Compute the installment schedule for a loan.

    Args:
        loan: Loan terms
        method: DAY_COUNT (default) or the legacy CLOSED_FORM annuity
        holiday_predicate: Holidays to skip when shifting due dates

    Returns:
        Schedule rows; empty when ``installment_count <= 0``
    """
    method = AmortizationMethod(method)

    if method == AmortizationMethod.DAY_COUNT:
        return compute_annuity_schedule(loan, holiday_predicate=holiday_predicate)
    elif method == AmortizationMethod.CLOSED_FORM:
        return compute_closed_form_schedule(loan, holiday_predicate=holiday_predicate)
    else:
        raise ValueError(f"Unsupported amortization method: {method}")
