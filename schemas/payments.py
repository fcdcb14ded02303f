from pydantic import Field, field_validator
from typing import List, Optional, Union

from constants import ALL_FEE_TYPES
from schemas.students import CamelModel


class PaymentIn(CamelModel):
    receipt_no: str
    year: int
    date: str
    student_id: str
    fee_type: str
    month: Union[str, List[str]]   # "March" ya ["March", "April"]
    amount: float
    description: Optional[str] = None

    @field_validator("receipt_no", "student_id", "date")
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("fee_type")
    @classmethod
    def check_fee_type(cls, v):
        if v not in ALL_FEE_TYPES:
            raise ValueError(f"Unknown fee type: {v}")
        return v

    @field_validator("month")
    @classmethod
    def check_month(cls, v):
        if not v:
            raise ValueError("month is required")
        return v


class PaymentOut(CamelModel):
    id: int
    receipt_no: str
    year: int
    date: str
    student_id: str
    fee_type: str
    month: Union[str, List[str]]
    amount: float
    description: Optional[str] = None


# Ek receipt, kai fee sectors (Payment Modal)
class PaymentSector(CamelModel):
    fee_type: str
    months: List[str] = Field(default_factory=list, alias="month")
    amount: float
    description: Optional[str] = None


class PaymentBatchIn(CamelModel):
    receipt_no: str
    year: int
    date: str
    # Student payment ke liye student_id, class payment ke liye class + section
    student_id: Optional[str] = None
    payment_class: Optional[int] = None
    payment_section: Optional[str] = None
    sectors: List[PaymentSector]
