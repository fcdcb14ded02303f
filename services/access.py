"""
Role checks for the API.
Login itself happens in the external script service, the frontend
forwards the logged in user's role in request headers.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from fastapi import Header, HTTPException

from constants import CLASS_TEACHER_ROLE, PAYMENT_EDIT_ROLES, STATUS_TRANSFERRED, STUDENT_EDIT_ROLES

logger = logging.getLogger(__name__)


@dataclass
class CurrentUser:
    role: Optional[str] = None
    assigned_class: Optional[int] = None
    assigned_section: Optional[str] = None

    @property
    def is_class_teacher(self) -> bool:
        return self.role == CLASS_TEACHER_ROLE

    @property
    def can_edit_students(self) -> bool:
        return self.role in STUDENT_EDIT_ROLES

    @property
    def can_edit_payments(self) -> bool:
        return self.role in PAYMENT_EDIT_ROLES


def get_current_user(
    x_user_role: Optional[str] = Header(None),
    x_assigned_class: Optional[int] = Header(None),
    x_assigned_section: Optional[str] = Header(None),
) -> CurrentUser:
    return CurrentUser(role=x_user_role, assigned_class=x_assigned_class, assigned_section=x_assigned_section)


def require_student_editor(user: CurrentUser):
    if not user.can_edit_students:
        logger.warning("Student edit blocked for role %r", user.role)
        raise HTTPException(status_code=403, detail="You do not have permission to edit students")


def require_payment_editor(user: CurrentUser):
    if not user.can_edit_payments:
        logger.warning("Payment edit blocked for role %r", user.role)
        raise HTTPException(status_code=403, detail="Only Accounts Officer can edit payments")


def visible_students(user: CurrentUser, students: Iterable, include_transferred: bool = False) -> List:
    """Class teachers only see their own class-section. Transferred students are hidden by default."""
    result = []
    for s in students:
        if user.is_class_teacher and (s.class_no != user.assigned_class or s.section != user.assigned_section):
            continue
        if not include_transferred and s.status == STATUS_TRANSFERRED:
            continue
        result.append(s)
    return result
