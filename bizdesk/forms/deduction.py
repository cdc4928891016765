from datetime import date
from typing import Any, Dict, Optional
from pydantic import Field, field_validator
from bizdesk.forms.base import Form, FormErrorMap, blank_to_none, is_blank, parse_date
from bizdesk.schemas.context import BranchContext
from bizdesk.schemas.deduction import CashAdvanceStatus, LoanStatus


def calculate_total_amount(principal: float, interest_rate: Optional[float]) -> float:
    """Principal plus flat interest; an empty or zero rate leaves the principal unchanged."""
    if not interest_rate:
        return principal
    return principal * (1 + interest_rate / 100)


def _today() -> str:
    return date.today().isoformat()


class CashAdvanceForm(Form):
    branch_id: Optional[int] = None
    user_id: Optional[int] = None
    amount: Optional[float] = None
    outstanding_balance: Optional[float] = None
    date_issued: str = Field(default_factory=_today)
    status: str = CashAdvanceStatus.ACTIVE.value
    description: Optional[str] = None

    @field_validator("branch_id", "user_id", "amount", "outstanding_balance", mode="before")
    @classmethod
    def empty_numbers(cls, v):
        return blank_to_none(v)

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.branch_id:
            errors["branch_id"] = "Branch is required"
        if not self.user_id:
            errors["user_id"] = "Employee is required"
        if not self.amount or self.amount <= 0:
            errors["amount"] = "Amount must be greater than 0"

        balance = self.outstanding_balance or 0
        if balance < 0:
            errors["outstanding_balance"] = "Outstanding balance cannot be negative"
        if balance > (self.amount or 0):
            errors["outstanding_balance"] = "Outstanding balance cannot exceed the advance amount"

        if is_blank(self.date_issued):
            errors["date_issued"] = "Date issued is required"
        if is_blank(self.status):
            errors["status"] = "Status is required"

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        return {
            "branch_id": self.branch_id,
            "user_id": self.user_id,
            "amount": self.amount,
            "outstanding_balance": self.outstanding_balance or 0,
            "date_issued": self.date_issued,
            "status": self.status,
            "description": self.description or None,
        }


class LoanForm(Form):
    branch_id: Optional[int] = None
    user_id: Optional[int] = None
    loan_type: str = ""
    principal_amount: Optional[float] = None
    interest_rate: Optional[float] = None
    total_amount: Optional[float] = None
    deduction_per_cutoff: Optional[float] = None
    remaining_balance: Optional[float] = None
    start_date: str = Field(default_factory=_today)
    end_date: Optional[str] = None
    status: str = LoanStatus.PENDING.value
    remarks: Optional[str] = None
    auto_calculate_total: bool = True

    @field_validator("branch_id", "user_id", "principal_amount", "interest_rate", "total_amount",
                     "deduction_per_cutoff", "remaining_balance", "end_date", mode="before")
    @classmethod
    def empty_values(cls, v):
        return blank_to_none(v)

    def apply_defaults(self, is_edit: bool = False):
        """Fill the total from principal and rate; on create, the balance starts at the total."""
        if self.auto_calculate_total and self.principal_amount and self.principal_amount > 0:
            self.total_amount = round(calculate_total_amount(self.principal_amount, self.interest_rate), 2)
            if not is_edit and self.remaining_balance is None:
                self.remaining_balance = self.total_amount

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.branch_id:
            errors["branch_id"] = "Branch is required"
        if not self.user_id:
            errors["user_id"] = "Employee is required"
        if not self.loan_type.strip():
            errors["loan_type"] = "Loan type is required"
        if not self.principal_amount or self.principal_amount <= 0:
            errors["principal_amount"] = "Principal amount must be greater than 0"
        if not self.total_amount or self.total_amount <= 0:
            errors["total_amount"] = "Total amount must be greater than 0"

        balance = self.remaining_balance or 0
        if balance < 0:
            errors["remaining_balance"] = "Remaining balance cannot be negative"
        if balance > (self.total_amount or 0):
            errors["remaining_balance"] = "Remaining balance cannot exceed the total amount"

        if not self.deduction_per_cutoff or self.deduction_per_cutoff <= 0:
            errors["deduction_per_cutoff"] = "Deduction per cutoff must be greater than 0"
        if is_blank(self.start_date):
            errors["start_date"] = "Start date is required"

        start, end = parse_date(self.start_date), parse_date(self.end_date)
        if start and end and end < start:
            errors["end_date"] = "End date must be after or equal to start date"

        if is_blank(self.status):
            errors["status"] = "Status is required"

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        return {
            "branch_id": self.branch_id,
            "user_id": self.user_id,
            "loan_type": self.loan_type.strip(),
            "principal_amount": self.principal_amount,
            "interest_rate": self.interest_rate,
            "total_amount": self.total_amount,
            "deduction_per_cutoff": self.deduction_per_cutoff,
            "remaining_balance": self.remaining_balance or 0,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "status": self.status,
            "remarks": self.remarks or None,
        }
