import datetime
import logging

from database import SessionLocal, init_db
from models.students import Student
from models.payments import Payment
from constants import TUITION_FEE, VEHICLE_FEE
from services.payments import class_payment_key

logger = logging.getLogger("seed")

# --- MAGICAL LINE (Ye Tables bana degi agar missing hain) ---
init_db()

DEMO_STUDENTS = [
    {"id": "S001", "name": "Alice Smith", "class_no": 6, "section": "GOLAP", "roll": 1,
     "address": "123 Main St", "guardian": "John Smith", "contact": "123-456-7890",
     "tuition_fee": 500.0, "vehicle_no": "DH-A-1234", "vehicle_fee": 150.0,
     "station_name": "Central Bus Stop", "date_of_birth": "2010-05-15", "blood_group": "A+",
     "status": "active", "admission_month": "January"},
    {"id": "S002", "name": "Rahim Uddin", "class_no": 7, "section": "DOYEL", "roll": 3,
     "guardian": "Karim Uddin", "tuition_fee": 550.0, "status": "active", "admission_month": "March"},
    {"id": "S003", "name": "Nusrat Jahan", "class_no": 9, "section": "LAL", "roll": 12,
     "guardian": "Abdul Jabbar", "tuition_fee": 700.0, "status": "transferred", "admission_month": "January"},
]


def seed_data():
    logger.info("Seeding demo data...")
    db = SessionLocal()
    year = datetime.date.today().year
    try:
        for s in DEMO_STUDENTS:
            if db.query(Student).filter_by(id=s["id"]).first():
                logger.info("Exists: %s", s["id"])
                continue
            db.add(Student(**s))
            logger.info("Added student: %s", s["id"])
        db.commit()

        if not db.query(Payment).filter_by(receipt_no="R-0001").first():
            db.add_all([
                Payment(receipt_no="R-0001", year=year, date=f"{year}-01-12", student_id="S001",
                        fee_type=TUITION_FEE, month="January", amount=500.0),
                Payment(receipt_no="R-0001", year=year, date=f"{year}-01-12", student_id="S001",
                        fee_type=VEHICLE_FEE, month="January", amount=150.0),
                Payment(receipt_no="R-0002", year=year, date=f"{year}-02-03",
                        student_id=class_payment_key(6, "GOLAP"), fee_type="DIARY", month="February",
                        amount=1200.0, description="Diary for whole section"),
            ])
            db.commit()
            logger.info("Added demo payments")
    finally:
        db.close()

    logger.info("All Data Seeded Successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_data()
