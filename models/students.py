from sqlalchemy import Column, Integer, String, Float, UniqueConstraint
from database import Base

class Student(Base):
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("class_no", "section", "roll", name="uq_student_class_section_roll"),
    )

    # School issued ID e.g. "S001" (always upper case)
    id = Column(String(50), primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    # --- ACADEMIC INFO ---
    class_no = Column(Integer, nullable=False, index=True)
    section = Column(String(50), nullable=False)
    roll = Column(Integer, nullable=False)

    # --- GUARDIAN & CONTACT ---
    address = Column(String(255), nullable=True)
    guardian = Column(String(100), nullable=True)
    contact = Column(String(30), nullable=True)

    # --- FEES ---
    tuition_fee = Column(Float, default=0.0)
    vehicle_no = Column(String(30), nullable=True)
    vehicle_fee = Column(Float, nullable=True)
    station_name = Column(String(100), nullable=True)

    # --- PERSONAL INFO ---
    date_of_birth = Column(String(20), nullable=True)
    blood_group = Column(String(5), nullable=True)

    status = Column(String(20), default="active")      # active / transferred
    admission_month = Column(String(20), nullable=True)  # Tuition starts from this month
