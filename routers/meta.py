from fastapi import APIRouter

from constants import (
    ALL_FEE_TYPES, CLASS_DATA, CLASS_FEE_TYPES, EMPLOYEE_TYPES, EXPENSE_TYPES,
    MONTH_ORDER, MONTHLESS_FEE_TYPES, STUDENT_FEE_TYPES, STUDENT_STATUSES,
)

router = APIRouter(prefix="/api/meta", tags=["Form Options"])

# Dropdowns ke liye saari fixed lists ek jagah
@router.get("")
def get_form_options():
    return {
        "months": MONTH_ORDER,
        "classes": {str(k): v for k, v in CLASS_DATA.items()},
        "studentFeeTypes": STUDENT_FEE_TYPES,
        "classFeeTypes": CLASS_FEE_TYPES,
        "allFeeTypes": ALL_FEE_TYPES,
        "monthlessFeeTypes": MONTHLESS_FEE_TYPES,
        "statuses": STUDENT_STATUSES,
        "expenseTypes": EXPENSE_TYPES,
        "employeeTypes": EMPLOYEE_TYPES,
    }
