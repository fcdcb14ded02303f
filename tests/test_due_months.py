from dataclasses import dataclass
from datetime import date
from typing import Optional

import pytest

from services.due_months import DueResult, DueStatus, compute_due_months, first_month, month_index


@dataclass
class FakeStudent:
    id: str = "S001"
    admission_month: Optional[str] = "January"
    status: str = "active"


@dataclass
class FakePayment:
    student_id: str = "S001"
    fee_type: str = "TUITION FEE"
    year: int = 2024
    month: object = "January"
    amount: float = 500.0


def test_transferred_ignores_payment_history():
    student = FakeStudent(status="transferred")
    result = compute_due_months(student, [FakePayment(month="March")], today=date(2024, 3, 15))
    assert result.status == DueStatus.TRANSFERRED
    assert result.label == "N/A (Transferred)"
    assert not result.is_due


@pytest.mark.parametrize("admission_month", [None, ""])
def test_missing_admission_month(admission_month):
    result = compute_due_months(FakeStudent(admission_month=admission_month), [], today=date(2024, 3, 15))
    assert result.status == DueStatus.NO_ADMISSION_MONTH
    assert result.label == "N/A (No admission month)"


def test_unknown_admission_month():
    result = compute_due_months(FakeStudent(admission_month="Xmas"), [], today=date(2024, 3, 15))
    assert result.status == DueStatus.INVALID_ADMISSION_MONTH
    assert result.label == "N/A (Invalid admission month)"


def test_nothing_paid_lists_every_month_up_to_today():
    result = compute_due_months(FakeStudent(), [], today=date(2024, 3, 15))
    assert result.status == DueStatus.DUE
    assert result.months == ("January", "February", "March")
    assert result.label == "January, February, March (Due)"
    assert result.is_due


def test_paid_month_is_skipped_but_earlier_gap_stays_due():
    payments = [FakePayment(month="February")]
    result = compute_due_months(FakeStudent(), payments, today=date(2024, 3, 15))
    assert result.months == ("January", "March")
    assert result.label == "January, March (Due)"


def test_every_month_paid_is_up_to_date():
    payments = [FakePayment(month=m) for m in ("January", "February", "March")]
    result = compute_due_months(FakeStudent(), payments, today=date(2024, 3, 15))
    assert result.status == DueStatus.UP_TO_DATE


def test_current_month_not_expected_before_the_tenth():
    result = compute_due_months(FakeStudent(), [], today=date(2024, 3, 9))
    assert result.months == ("January", "February")


def test_december_carryover_in_early_january():
    student = FakeStudent(admission_month="June")
    payments = [FakePayment(year=2023, month="November")]
    result = compute_due_months(student, payments, today=date(2024, 1, 5))
    assert result.status == DueStatus.DECEMBER_CARRYOVER
    assert result.label == "December (Last Year Due)"
    assert result.is_due


def test_december_carryover_even_for_unknown_admission_month():
    result = compute_due_months(FakeStudent(admission_month="Xmas"), [], today=date(2024, 1, 5))
    assert result.status == DueStatus.DECEMBER_CARRYOVER


def test_last_december_paid_in_early_january_is_up_to_date():
    payments = [FakePayment(year=2023, month=["November", "December"])]
    result = compute_due_months(FakeStudent(admission_month="June"), payments, today=date(2024, 1, 5))
    assert result.status == DueStatus.UP_TO_DATE


def test_december_admission_paid_in_december():
    payments = [FakePayment(month="December")]
    result = compute_due_months(FakeStudent(admission_month="December"), payments, today=date(2024, 12, 31))
    assert result.status == DueStatus.UP_TO_DATE
    assert result.label == "Up-to-date"
    assert result.months == ()


def test_admission_later_than_today_is_up_to_date():
    result = compute_due_months(FakeStudent(admission_month="August"), [], today=date(2024, 3, 15))
    assert result.status == DueStatus.UP_TO_DATE


def test_multi_month_payment_counts_first_month_only():
    payments = [FakePayment(month=["January", "February", "March"])]
    result = compute_due_months(FakeStudent(), payments, today=date(2024, 3, 15))
    assert result.months == ("February", "March")


def test_other_students_fees_and_years_are_ignored():
    payments = [
        FakePayment(student_id="S002", month="March"),
        FakePayment(fee_type="VEHICLE FEE", month="March"),
        FakePayment(year=2023, month="March"),
        FakePayment(student_id="CLASS-6-GOLAP", fee_type="DIARY", month="March"),
    ]
    result = compute_due_months(FakeStudent(), payments, today=date(2024, 3, 15))
    assert result.months == ("January", "February", "March")


def test_malformed_payments_are_skipped():
    class Bare:
        student_id = "S001"
        fee_type = "TUITION FEE"
        year = 2024

    payments = [Bare(), FakePayment(month="Smarch"), FakePayment(month=[]), FakePayment(month=None)]
    result = compute_due_months(FakeStudent(), payments, today=date(2024, 3, 15))
    assert result.months == ("January", "February", "March")


def test_same_inputs_same_result():
    student = FakeStudent(admission_month="February")
    payments = [FakePayment(month="February")]
    today = date(2024, 6, 20)
    first = compute_due_months(student, payments, today)
    second = compute_due_months(student, payments, today)
    assert first == second
    assert first.months == ("March", "April", "May", "June")


def test_today_defaults_to_wall_clock():
    result = compute_due_months(FakeStudent(admission_month="Xmas"), [])
    assert isinstance(result, DueResult)


def test_month_helpers():
    assert month_index("January") == 0
    assert month_index("December") == 11
    assert month_index("Jan") == -1
    assert month_index(None) == -1
    assert first_month(["May", "June"]) == "May"
    assert first_month("May") == "May"
    assert first_month([]) is None
