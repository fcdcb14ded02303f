# --- CLASSES & SECTIONS ---
CLASS_DATA = {
    6: ["GOLAP", "SHAPLA", "BELI", "SHEULY", "TAGAR", "BAKUL", "RAJANIGANDHA"],
    7: ["DOYEL", "KOYEL", "MOYNA", "TIYA", "EAGLE", "KOKIL"],
    8: ["SHITOLOKKHA", "MEGHNA", "PADMA", "JAMUNA"],
    9: ["LAL", "SABUJ"],
    10: ["AAM", "JAM"],
}

# --- MONTHS (calendar order, January = 0) ---
MONTH_ORDER = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# --- FEE TYPES ---
TUITION_FEE = "TUITION FEE"
VEHICLE_FEE = "VEHICLE FEE"

STUDENT_FEE_TYPES = [TUITION_FEE, VEHICLE_FEE, "ADMISSION", "RE-ADMISSION", "HALF YEARLY EXAM", "YEARLY EXAM"]
CLASS_FEE_TYPES = [
    "MONTHLY TEST", "DIARY", "TIE", "BAG", "SPORTS", "ID CARD",
    "ID CARD HOLDER", "ID CARD RIBBON", "MILAD", "OTHERS",
]
ALL_FEE_TYPES = STUDENT_FEE_TYPES + CLASS_FEE_TYPES

# One-time fees, stored with month "N/A"
MONTHLESS_FEE_TYPES = ["ADMISSION", "RE-ADMISSION", "HALF YEARLY EXAM", "YEARLY EXAM"]
NO_MONTH = "N/A"

EXPENSE_TYPES = ["Salaries", "Utilities", "Maintenance", "Supplies", "Other"]
EMPLOYEE_TYPES = [
    "Assistant Teacher", "Accounts Officer", "Computer Operator",
    "Office Staff", "Assistant Head Teacher", "Head Teacher",
]

# --- STUDENT STATUS ---
STATUS_ACTIVE = "active"
STATUS_TRANSFERRED = "transferred"
STUDENT_STATUSES = [STATUS_ACTIVE, STATUS_TRANSFERRED]

# --- ROLES ---
STUDENT_EDIT_ROLES = ["Admin", "Accountant", "Accounts Officer"]
PAYMENT_EDIT_ROLES = ["Accounts Officer"]
CLASS_TEACHER_ROLE = "Class Teacher"

# Class payments are stored against "CLASS-<class>-<section>"
CLASS_PAYMENT_PREFIX = "CLASS"
