"""
Fee Payment Router
Single payments, multi-sector receipts (one row per month) and edits.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models.payments import Payment
from schemas.payments import PaymentIn, PaymentOut, PaymentBatchIn
from services.access import CurrentUser, get_current_user, require_payment_editor
from services.payments import (
    PaymentValidationError, class_payment_key, expand_sectors, is_class_payment, parse_class_payment_key,
)
from services.providers import StudentProvider, PaymentProvider, get_payment_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["Fee Payments"])


def resolve_payer(db: Session, payer_id: str) -> str:
    """Validate the payer and return the ID to store (student IDs are upper case)."""
    if is_class_payment(payer_id):
        if not parse_class_payment_key(payer_id):
            raise HTTPException(status_code=400, detail=f"Invalid class payment: {payer_id}")
        return payer_id

    student = StudentProvider(db).get(payer_id.upper())
    if not student:
        raise HTTPException(status_code=404, detail=f"Student with ID {payer_id} not found.")
    return student.id


# =====================
# LIST
# =====================

@router.get("", response_model=List[PaymentOut])
def list_payments(studentId: Optional[str] = None, payments: PaymentProvider = Depends(get_payment_provider)):
    """All payments, newest first. `studentId` filter optional."""
    return payments.list(student_id=studentId)


# =====================
# CREATE
# =====================

@router.post("", response_model=PaymentOut, status_code=201)
def create_payment(data: PaymentIn, db: Session = Depends(get_db)):
    payer_id = resolve_payer(db, data.student_id)

    payment = Payment(**data.model_dump(exclude={"student_id"}), student_id=payer_id)
    db.add(payment)
    db.commit()
    db.refresh(payment)
    logger.info("Payment %s saved: %s %s (%s)", payment.receipt_no, payer_id, payment.fee_type, payment.month)
    return payment


@router.post("/batch", response_model=List[PaymentOut], status_code=201)
def create_payment_batch(data: PaymentBatchIn, db: Session = Depends(get_db)):
    """
    Payment Modal submit.
    - Student mode: `studentId` + sectors (tuition, vehicle, admission...)
    - Class mode: `paymentClass` + `paymentSection`, stored as CLASS-<class>-<section>
    All rows are saved in one transaction.
    """
    if data.student_id:
        payer_id = resolve_payer(db, data.student_id)
    elif data.payment_class and data.payment_section:
        payer_id = resolve_payer(db, class_payment_key(data.payment_class, data.payment_section))
    else:
        raise HTTPException(status_code=400, detail="Student ID or Class and Section are required.")

    try:
        rows = expand_sectors(
            data.receipt_no, data.year, data.date, payer_id,
            [s.model_dump() for s in data.sectors],
        )
    except PaymentValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    payments = [Payment(**row) for row in rows]
    db.add_all(payments)
    db.commit()
    for p in payments:
        db.refresh(p)
    logger.info("Receipt %s saved for %s (%d rows)", data.receipt_no, payer_id, len(payments))
    return payments


# =====================
# EDIT (Accounts Officer only)
# =====================

@router.put("/{payment_id}", response_model=PaymentOut)
def update_payment(
    payment_id: int,
    data: PaymentIn,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    require_payment_editor(user)

    payment = db.query(Payment).filter(Payment.id == payment_id).first()
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")

    payer_id = resolve_payer(db, data.student_id)
    for key, value in data.model_dump(exclude={"student_id"}).items():
        setattr(payment, key, value)
    payment.student_id = payer_id
    db.commit()
    db.refresh(payment)
    logger.info("Payment %s updated", payment_id)
    return payment


@router.delete("/{payment_id}")
def delete_payment(
    payment_id: int,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    require_payment_editor(user)

    payment = db.query(Payment).filter(Payment.id == payment_id).first()
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    db.delete(payment)
    db.commit()
    logger.info("Payment %s deleted", payment_id)
    return {"message": "Deleted"}
