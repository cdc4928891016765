from enum import Enum
from typing import Optional
from bizdesk.schemas.common import Resource, BranchRef

class CashAdvanceStatus(str, Enum):
    ACTIVE = "active"
    PAID = "paid"
    CANCELLED = "cancelled"

class LoanStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    PAID = "paid"
    CANCELLED = "cancelled"

class UserAccount(Resource):
    id: int
    email: Optional[str] = None
    name: Optional[str] = None

class EmployeeInfo(Resource):
    id: Optional[int] = None
    user_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    user: Optional[UserAccount] = None

class LoanEmployee(UserAccount):
    user_info: Optional[EmployeeInfo] = None

def display_name(info: Optional[EmployeeInfo], email: Optional[str] = None) -> str:
    if info and (info.first_name or info.last_name):
        return " ".join(p for p in [info.first_name, info.last_name] if p)
    return email or "Unknown"

class CashAdvance(Resource):
    id: int
    branch_id: int
    code: str
    user_id: int
    amount: float
    outstanding_balance: float
    date_issued: str
    status: str
    description: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    branch: Optional[BranchRef] = None
    user_info: Optional[EmployeeInfo] = None
    creator: Optional[UserAccount] = None

    @property
    def employee_name(self) -> str:
        email = self.user_info.user.email if self.user_info and self.user_info.user else None
        return display_name(self.user_info, email)

class Loan(Resource):
    id: int
    branch_id: int
    code: str
    user_id: int
    loan_type: str
    principal_amount: float
    interest_rate: Optional[float] = None
    total_amount: float
    deduction_per_cutoff: float
    remaining_balance: float
    start_date: str
    end_date: Optional[str] = None
    status: str
    remarks: Optional[str] = None
    created_by: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    branch: Optional[BranchRef] = None
    employee: Optional[LoanEmployee] = None
    creator: Optional[UserAccount] = None

    @property
    def employee_name(self) -> str:
        if not self.employee:
            return "Unknown"
        return display_name(self.employee.user_info, self.employee.email)
