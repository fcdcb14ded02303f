from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
import datetime
import logging

from database import get_db
from models.students import Student
from schemas.students import StudentCreate, StudentUpdate, StudentOut, StudentListItem, DuesOut
from services.access import CurrentUser, get_current_user, require_student_editor, visible_students
from services.due_months import compute_due_months
from services.payments import fee_total, last_paid_month
from services.providers import (
    StudentProvider, PaymentProvider, get_student_provider, get_payment_provider, get_today,
)
from constants import TUITION_FEE, VEHICLE_FEE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["Students"])

DUPLICATE_ROLL = "A student with this Class, Section, and Roll already exists."


def _roll_taken(db: Session, class_no: int, section: str, roll: int, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Student).filter(
        Student.class_no == class_no,
        Student.section == section,
        Student.roll == roll,
    )
    if exclude_id:
        query = query.filter(Student.id != exclude_id)
    return query.first() is not None


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_ROLL)


def build_dues(student: Student, payments, today: datetime.date) -> DuesOut:
    result = compute_due_months(student, payments, today)
    return DuesOut(
        student_id=student.id,
        status=result.status.value,
        months=list(result.months),
        label=result.label,
        is_due=result.is_due,
        tuition_last_paid=last_paid_month(student.id, TUITION_FEE, payments),
        vehicle_last_paid=last_paid_month(student.id, VEHICLE_FEE, payments),
        tuition_total=fee_total(student.id, TUITION_FEE, payments),
        vehicle_total=fee_total(student.id, VEHICLE_FEE, payments),
    )


# ===============================
#   1. LIST & DETAILS
# ===============================

@router.get("", response_model=List[StudentListItem])
def list_students(
    class_no: Optional[int] = None,
    section: Optional[str] = None,
    include_transferred: bool = False,
    user: CurrentUser = Depends(get_current_user),
    students: StudentProvider = Depends(get_student_provider),
    payments: PaymentProvider = Depends(get_payment_provider),
    today: datetime.date = Depends(get_today),
):
    """
    Student list, ordered by class, section, roll.
    Har row ke saath tuition due months bhi aate hain.
    """
    rows = visible_students(user, students.list(class_no, section), include_transferred)
    all_payments = payments.list()

    result = []
    for s in rows:
        due = compute_due_months(s, all_payments, today)
        result.append(StudentListItem(
            **StudentOut.model_validate(s).model_dump(),
            due_months=due.label,
            is_due=due.is_due,
        ))
    return result


@router.get("/{student_id}")
def get_student(
    student_id: str,
    students: StudentProvider = Depends(get_student_provider),
    payments: PaymentProvider = Depends(get_payment_provider),
    today: datetime.date = Depends(get_today),
):
    student = students.get(student_id.upper())
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    student_payments = payments.for_student(student.id)
    return {
        "student": StudentOut.model_validate(student).model_dump(by_alias=True),
        "payments": [
            {
                "id": p.id,
                "receiptNo": p.receipt_no,
                "year": p.year,
                "date": p.date,
                "feeType": p.fee_type,
                "month": p.month,
                "amount": p.amount,
                "description": p.description,
            }
            for p in student_payments
        ],
        "dues": build_dues(student, student_payments, today).model_dump(by_alias=True),
    }


@router.get("/{student_id}/dues", response_model=DuesOut)
def get_student_dues(
    student_id: str,
    students: StudentProvider = Depends(get_student_provider),
    payments: PaymentProvider = Depends(get_payment_provider),
    today: datetime.date = Depends(get_today),
):
    student = students.get(student_id.upper())
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return build_dues(student, payments.for_student(student.id), today)


# ===============================
#   2. STUDENT CRUD OPERATIONS
# ===============================

@router.post("", response_model=StudentOut, status_code=201)
def create_student(
    data: StudentCreate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    require_student_editor(user)

    if db.query(Student).filter(Student.id == data.id).first():
        raise HTTPException(status_code=409, detail="Student ID already exists!")
    if _roll_taken(db, data.class_no, data.section, data.roll):
        raise HTTPException(status_code=409, detail=DUPLICATE_ROLL)

    student = Student(**data.model_dump())
    db.add(student)
    _commit(db)
    db.refresh(student)
    logger.info("Student %s added to class %s-%s", student.id, student.class_no, student.section)
    return student


@router.put("/{student_id}", response_model=StudentOut)
def update_student(
    student_id: str,
    data: StudentUpdate,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    require_student_editor(user)

    student = db.query(Student).filter(Student.id == student_id.upper()).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    if _roll_taken(db, data.class_no, data.section, data.roll, exclude_id=student.id):
        raise HTTPException(status_code=409, detail=DUPLICATE_ROLL)

    for key, value in data.model_dump().items():
        setattr(student, key, value)
    _commit(db)
    db.refresh(student)
    logger.info("Student %s updated", student.id)
    return student


@router.delete("/{student_id}")
def delete_student(
    student_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    require_student_editor(user)

    student = db.query(Student).filter(Student.id == student_id.upper()).first()
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    db.delete(student)
    db.commit()
    logger.info("Student %s deleted", student_id.upper())
    return {"message": "Deleted"}
