from typing import Any, Dict, List, Optional
from pydantic import BaseModel, field_validator
from bizdesk.forms.base import Form, FormErrorMap, blank_to_none, is_blank, number_to_str
from bizdesk.schemas.context import BranchContext
from bizdesk.schemas.expense import Expense

ALLOWED_ATTACHMENT_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class UploadedFile(BaseModel):
    file_name: str
    content_type: str
    content: bytes = b""


class ExpenseForm(Form):
    name: str = ""
    branch_id: str = ""
    area_of_expense: str = ""
    amount: Optional[float] = None
    expense_date: str = ""
    description: str = ""
    attachments: List[UploadedFile] = []
    attachment_ids_to_keep: List[int] = []

    @field_validator("amount", mode="before")
    @classmethod
    def empty_amount(cls, v):
        return blank_to_none(v)

    @field_validator("branch_id", mode="before")
    @classmethod
    def numeric_branch(cls, v):
        return number_to_str(v)

    @classmethod
    def from_expense(cls, expense: Expense) -> "ExpenseForm":
        return cls(
            name=expense.name,
            branch_id=str(expense.branch_id),
            area_of_expense=expense.area_of_expense,
            amount=expense.amount,
            expense_date=expense.expense_date.split("T")[0],
            description=expense.description or "",
            attachment_ids_to_keep=[a.id for a in expense.attachments],
        )

    def validate_form(self, **kwargs: Any) -> FormErrorMap:
        errors: FormErrorMap = {}

        if not self.name.strip():
            errors["name"] = "Name is required"
        if not self.area_of_expense.strip():
            errors["area_of_expense"] = "Area of expense is required"
        if self.amount is None or self.amount <= 0:
            errors["amount"] = "Amount must be greater than 0"
        if is_blank(self.expense_date):
            errors["expense_date"] = "Expense date is required"

        for file in self.attachments:
            if file.content_type not in ALLOWED_ATTACHMENT_TYPES:
                errors["attachments"] = "Only JPEG, JPG, PNG, PDF, DOC, and DOCX files are allowed"
                break

        return errors

    def prepare_submit_data(self, branch: Optional[BranchContext] = None, is_edit: bool = False) -> Dict[str, Any]:
        branch_id = branch.id if branch else (int(self.branch_id) if self.branch_id.strip().isdigit() else None)

        data: Dict[str, Any] = {
            "name": self.name,
            "branch_id": branch_id,
            "area_of_expense": self.area_of_expense,
            "amount": self.amount,
            "expense_date": self.expense_date,
            "description": self.description or None,
        }

        if self.attachments:
            data["attachments"] = [(f.file_name, f.content, f.content_type) for f in self.attachments]

        if is_edit and self.attachment_ids_to_keep:
            data["attachment_ids_to_keep"] = list(self.attachment_ids_to_keep)

        return data
