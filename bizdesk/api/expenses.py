from typing import List, Optional
from fastapi import Depends, File, Form as FormField, UploadFile
from bizdesk.api.crud import build_router, validate_and_prepare
from bizdesk.api.deps import current_workspace
from bizdesk.api.responses import mutation_response
from bizdesk.forms.expense import ExpenseForm, UploadedFile
from bizdesk.stores.workspace import Workspace

# GET/DELETE come from the factory; writes are multipart
router = build_router("expenses", "expense")


def _read_uploads(attachments: Optional[List[UploadFile]]) -> List[UploadedFile]:
    uploads = []
    for upload in attachments or []:
        uploads.append(UploadedFile(
            file_name=upload.filename or "attachment",
            content_type=upload.content_type or "application/octet-stream",
            content=upload.file.read(),
        ))
    return uploads


def _expense_form(name, area_of_expense, amount, expense_date, description, branch_id,
                  attachments, attachment_ids_to_keep) -> ExpenseForm:
    return ExpenseForm.parse({
        "name": name,
        "area_of_expense": area_of_expense,
        "amount": amount,
        "expense_date": expense_date,
        "description": description,
        "branch_id": branch_id,
        "attachments": _read_uploads(attachments),
        "attachment_ids_to_keep": attachment_ids_to_keep or [],
    })


@router.post("", status_code=201)
def create_expense(
    name: str = FormField(""),
    area_of_expense: str = FormField(""),
    amount: str = FormField(""),
    expense_date: str = FormField(""),
    description: str = FormField(""),
    branch_id: str = FormField(""),
    attachments: Optional[List[UploadFile]] = File(None),
    workspace: Workspace = Depends(current_workspace),
):
    form = _expense_form(name, area_of_expense, amount, expense_date, description, branch_id, attachments, None)
    data = validate_and_prepare(form, workspace)
    response = workspace.expenses.create(data)
    return mutation_response(response, "Expense created successfully")


@router.put("/{record_id}")
def update_expense(
    record_id: int,
    name: str = FormField(""),
    area_of_expense: str = FormField(""),
    amount: str = FormField(""),
    expense_date: str = FormField(""),
    description: str = FormField(""),
    branch_id: str = FormField(""),
    attachments: Optional[List[UploadFile]] = File(None),
    attachment_ids_to_keep: Optional[List[int]] = FormField(None),
    workspace: Workspace = Depends(current_workspace),
):
    form = _expense_form(name, area_of_expense, amount, expense_date, description, branch_id,
                         attachments, attachment_ids_to_keep)
    data = validate_and_prepare(form, workspace, record_id)
    response = workspace.expenses.update(record_id, data)
    return mutation_response(response, "Expense updated successfully")
