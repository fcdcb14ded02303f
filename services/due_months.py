"""
Tuition Due-Month Calculator
Works out which calendar months of tuition a student still owes.

Shared by the student list, the student detail page and the dues API so
every screen shows the same answer.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple
import datetime

from constants import MONTH_ORDER, TUITION_FEE, STATUS_TRANSFERRED

# Before this day of the month the current month is not yet expected
GRACE_DAY = 10
DECEMBER = "December"


class DueStatus(str, Enum):
    TRANSFERRED = "transferred"
    NO_ADMISSION_MONTH = "no_admission_month"
    INVALID_ADMISSION_MONTH = "invalid_admission_month"
    UP_TO_DATE = "up_to_date"
    DUE = "due"
    DECEMBER_CARRYOVER = "december_carryover"


_LABELS = {
    DueStatus.TRANSFERRED: "N/A (Transferred)",
    DueStatus.NO_ADMISSION_MONTH: "N/A (No admission month)",
    DueStatus.INVALID_ADMISSION_MONTH: "N/A (Invalid admission month)",
    DueStatus.UP_TO_DATE: "Up-to-date",
    DueStatus.DECEMBER_CARRYOVER: "December (Last Year Due)",
}


@dataclass(frozen=True)
class DueResult:
    status: DueStatus
    months: Tuple[str, ...] = ()

    @property
    def is_due(self) -> bool:
        return self.status in (DueStatus.DUE, DueStatus.DECEMBER_CARRYOVER)

    @property
    def label(self) -> str:
        """Display string, e.g. "January, March (Due)" or "Up-to-date"."""
        if self.status == DueStatus.DUE:
            return ", ".join(self.months) + " (Due)"
        return _LABELS[self.status]


def month_index(name) -> int:
    """Zero based index of a month name, -1 when it is not a month."""
    try:
        return MONTH_ORDER.index(name)
    except ValueError:
        return -1


def first_month(month):
    """
    First listed month of a payment.
    NOTE: a multi-month record only counts its first month for dues.
    """
    if isinstance(month, (list, tuple)):
        return month[0] if month else None
    return month


def covers_month(month, name: str) -> bool:
    if isinstance(month, (list, tuple)):
        return name in month
    return month == name


def _tuition_payments(student_id, payments: Iterable, year: int) -> List:
    return [
        p for p in payments
        if getattr(p, "student_id", None) == student_id
        and getattr(p, "fee_type", None) == TUITION_FEE
        and getattr(p, "year", None) == year
    ]


def compute_due_months(student, payments: Iterable, today: Optional[datetime.date] = None) -> DueResult:
    """
    Calculate outstanding tuition months for one student.

    - `student` needs `id`, `admission_month`, `status`
    - `payments` can be every payment in the system, filtering happens here
    - `today` defaults to the wall clock date

    Never raises for bad payment rows, they are just ignored.
    """
    if getattr(student, "status", None) == STATUS_TRANSFERRED:
        return DueResult(DueStatus.TRANSFERRED)

    admission_month = getattr(student, "admission_month", None)
    if not admission_month:
        return DueResult(DueStatus.NO_ADMISSION_MONTH)

    today = today or datetime.date.today()
    payments = list(payments or [])
    student_id = getattr(student, "id", None)
    current_year = today.year

    # Only the exact paid months are skipped, an older unpaid month stays due
    paid_idx = set()
    for p in _tuition_payments(student_id, payments, current_year):
        idx = month_index(first_month(getattr(p, "month", None)))
        if idx != -1:
            paid_idx.add(idx)

    # Grace period: before the 10th only the previous month is expected
    current_month_idx = today.month - 1
    if today.day < GRACE_DAY:
        expected_idx = current_month_idx - 1
    else:
        expected_idx = current_month_idx

    if expected_idx < 0:
        last_year = _tuition_payments(student_id, payments, current_year - 1)
        dec_paid = any(covers_month(getattr(p, "month", None), DECEMBER) for p in last_year)
        # month_index() is -1 for unknown names too, so this check always passes
        if not dec_paid and month_index(admission_month) <= 11:
            return DueResult(DueStatus.DECEMBER_CARRYOVER, (DECEMBER,))

    admission_idx = month_index(admission_month)
    if admission_idx == -1:
        return DueResult(DueStatus.INVALID_ADMISSION_MONTH)

    due = [
        MONTH_ORDER[i] for i in range(admission_idx, expected_idx + 1)
        if i not in paid_idx
    ]

    if not due:
        return DueResult(DueStatus.UP_TO_DATE)
    return DueResult(DueStatus.DUE, tuple(due))
