from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional

from constants import CLASS_DATA, MONTH_ORDER, STUDENT_STATUSES

# JSON me camelCase (tuitionFee, admissionMonth), Python me snake_case
class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class StudentFields(CamelModel):
    name: str
    class_no: int = Field(alias="class")
    section: str
    roll: int
    address: Optional[str] = None
    guardian: Optional[str] = None
    contact: Optional[str] = None
    tuition_fee: Optional[float] = None
    vehicle_no: Optional[str] = None
    vehicle_fee: Optional[float] = None
    station_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    blood_group: Optional[str] = None
    status: Optional[str] = "active"
    admission_month: Optional[str] = None


# 1. Student save karne ke liye (POST / PUT)
class StudentIn(StudentFields):
    tuition_fee: float
    status: str = "active"

    @field_validator("status")
    @classmethod
    def check_status(cls, v):
        if v not in STUDENT_STATUSES:
            raise ValueError(f"status must be one of {STUDENT_STATUSES}")
        return v

    @field_validator("admission_month")
    @classmethod
    def check_admission_month(cls, v):
        # Empty string = no admission month
        if not v:
            return None
        if v not in MONTH_ORDER:
            raise ValueError(f"Invalid admission month: {v}")
        return v

    @model_validator(mode="after")
    def check_section(self):
        if self.section not in CLASS_DATA.get(self.class_no, []):
            raise ValueError(f"Section {self.section} does not exist in class {self.class_no}")
        return self


class StudentCreate(StudentIn):
    id: str

    @field_validator("id")
    @classmethod
    def upper_id(cls, v):
        v = v.strip().upper()
        if not v:
            raise ValueError("id is required")
        return v


class StudentUpdate(StudentIn):
    pass


# 2. Response Models (DB rows as stored)
class StudentOut(StudentFields):
    id: str


class StudentListItem(StudentOut):
    due_months: str
    is_due: bool


class DuesOut(CamelModel):
    student_id: str
    status: str
    months: List[str] = []
    label: str
    is_due: bool
    tuition_last_paid: str
    vehicle_last_paid: str
    tuition_total: float
    vehicle_total: float
