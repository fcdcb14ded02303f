from sqlalchemy import Column, Integer, String, Float, JSON, Text
from database import Base

class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    receipt_no = Column(String(50), nullable=False, index=True)
    year = Column(Integer, nullable=False, index=True)
    date = Column(String(20), nullable=False)   # e.g. "2024-03-15"

    # Student ID, ya class payment ke liye "CLASS-6-GOLAP" (isliye FK nahi hai)
    student_id = Column(String(60), nullable=False, index=True)
    fee_type = Column(String(50), nullable=False)

    # "March", ["March", "April"] ya "N/A" (one-time fees)
    month = Column(JSON, nullable=False)
    amount = Column(Float, default=0.0)
    description = Column(Text, nullable=True)
