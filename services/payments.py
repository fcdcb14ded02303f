"""Payment helpers shared by the payment APIs and the dues summary."""
import logging
from typing import Iterable, List, Optional, Tuple

from constants import (
    CLASS_DATA, CLASS_PAYMENT_PREFIX, MONTH_ORDER, MONTHLESS_FEE_TYPES, NO_MONTH, ALL_FEE_TYPES,
)
from services.due_months import first_month, month_index

logger = logging.getLogger(__name__)


class PaymentValidationError(ValueError):
    """Payment data that cannot be saved."""


# =====================
# CLASS PAYMENT KEYS
# =====================

def class_payment_key(class_no, section: str) -> str:
    return f"{CLASS_PAYMENT_PREFIX}-{class_no}-{section}"


def is_class_payment(payer_id) -> bool:
    return isinstance(payer_id, str) and payer_id.startswith(CLASS_PAYMENT_PREFIX + "-")


def parse_class_payment_key(payer_id) -> Optional[Tuple[int, str]]:
    """Split a class key: CLASS-6-GOLAP -> (6, "GOLAP"). None if invalid."""
    if not is_class_payment(payer_id):
        return None
    parts = payer_id.split("-", 2)
    if len(parts) != 3:
        return None
    try:
        class_no = int(parts[1])
    except ValueError:
        return None
    section = parts[2]
    if section not in CLASS_DATA.get(class_no, []):
        return None
    return class_no, section


# =====================
# SECTOR FAN-OUT
# =====================

def expand_sectors(receipt_no: str, year: int, date: str, payer_id: str, sectors: Iterable[dict]) -> List[dict]:
    """
    Turn one receipt with several fee sectors into payment rows.

    Monthly fees become one row per selected month, one-time fees
    (admission, exams) become a single row with month "N/A".
    """
    if not receipt_no:
        raise PaymentValidationError("Receipt No. is required.")
    sectors = list(sectors)
    if not sectors:
        raise PaymentValidationError("At least one payment sector is required.")

    rows = []
    for sector in sectors:
        fee_type = sector.get("fee_type")
        amount = sector.get("amount")
        if not fee_type or amount is None:
            raise PaymentValidationError("Fee Type and Amount are required for all payment sectors.")
        if fee_type not in ALL_FEE_TYPES:
            raise PaymentValidationError(f"Unknown fee type: {fee_type}")

        base = {
            "receipt_no": receipt_no,
            "year": year,
            "date": date,
            "student_id": payer_id,
            "fee_type": fee_type,
            "amount": float(amount),
            "description": sector.get("description") or None,
        }

        if fee_type in MONTHLESS_FEE_TYPES:
            rows.append(dict(base, month=NO_MONTH))
            continue

        months = sector.get("months") or []
        if not months:
            raise PaymentValidationError(f"Please select at least one month for {fee_type}.")
        for m in months:
            if m not in MONTH_ORDER:
                raise PaymentValidationError(f"Invalid month: {m}")
            rows.append(dict(base, month=m))

    logger.debug("Receipt %s expanded into %d payment rows", receipt_no, len(rows))
    return rows


# =====================
# SUMMARIES
# =====================

def _for_fee(student_id, fee_type: str, payments: Iterable) -> List:
    return [p for p in payments if p.student_id == student_id and p.fee_type == fee_type]


def last_paid_month(student_id, fee_type: str, payments: Iterable) -> str:
    """Latest paid month (newest year first), "N/A" when nothing matches."""
    relevant = [
        p for p in _for_fee(student_id, fee_type, payments)
        if month_index(first_month(p.month)) != -1
    ]
    if not relevant:
        return NO_MONTH
    latest = max(relevant, key=lambda p: (p.year or 0, month_index(first_month(p.month))))
    return first_month(latest.month)


def fee_total(student_id, fee_type: str, payments: Iterable) -> float:
    return sum((p.amount or 0) for p in _for_fee(student_id, fee_type, payments))


def fee_paid(student_id, fee_type: str, payments: Iterable) -> bool:
    return any(True for _ in _for_fee(student_id, fee_type, payments))
