"""Read access to students and payments, plus the clock used for dues."""
from typing import List, Optional
import datetime

from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from models.students import Student
from models.payments import Payment


class StudentProvider:
    def __init__(self, db: Session):
        self.db = db

    def list(self, class_no: Optional[int] = None, section: Optional[str] = None) -> List[Student]:
        query = self.db.query(Student)
        if class_no:
            query = query.filter(Student.class_no == class_no)
        if section:
            query = query.filter(Student.section == section)
        return query.order_by(Student.class_no.asc(), Student.section.asc(), Student.roll.asc()).all()

    def get(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()


class PaymentProvider:
    def __init__(self, db: Session):
        self.db = db

    def list(self, student_id: Optional[str] = None) -> List[Payment]:
        query = self.db.query(Payment)
        if student_id:
            query = query.filter(Payment.student_id == student_id)
        return query.order_by(Payment.date.desc(), Payment.id.desc()).all()

    def for_student(self, student_id: str) -> List[Payment]:
        return self.list(student_id=student_id)

    def get(self, payment_id: int) -> Optional[Payment]:
        return self.db.query(Payment).filter(Payment.id == payment_id).first()


def get_student_provider(db: Session = Depends(get_db)) -> StudentProvider:
    return StudentProvider(db)


def get_payment_provider(db: Session = Depends(get_db)) -> PaymentProvider:
    return PaymentProvider(db)


def get_today() -> datetime.date:
    """Clock dependency, tests override it with a fixed date."""
    return datetime.date.today()
