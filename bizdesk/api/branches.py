from fastapi import APIRouter, Body, Depends
from bizdesk.api.deps import current_workspace
from bizdesk.services.base import response_message
from bizdesk.stores.workspace import Workspace

router = APIRouter(prefix="/branches", tags=["branches"])


@router.get("/{branch_id}/employees")
def branch_employees(branch_id: int, workspace: Workspace = Depends(current_workspace)):
    return workspace.branches.service.employees(branch_id)


@router.post("/{branch_id}/employees", status_code=201)
def assign_employee(branch_id: int, user_id: int = Body(..., embed=True),
                    workspace: Workspace = Depends(current_workspace)):
    response = workspace.branches.service.assign_user(branch_id, user_id)
    workspace.activity_logs.invalidate()
    return {"message": response_message(response, "User assigned to branch successfully")}


@router.delete("/{branch_id}/employees/{user_id}")
def remove_employee(branch_id: int, user_id: int, workspace: Workspace = Depends(current_workspace)):
    response = workspace.branches.service.remove_user(branch_id, user_id)
    workspace.activity_logs.invalidate()
    return {"message": response_message(response, "User removed from branch successfully")}


@router.post("/{branch_id}/transfer/{new_branch_id}")
def transfer_employee(branch_id: int, new_branch_id: int, user_id: int = Body(..., embed=True),
                      workspace: Workspace = Depends(current_workspace)):
    response = workspace.branches.service.transfer_user(branch_id, new_branch_id, user_id)
    workspace.activity_logs.invalidate()
    return {"message": response_message(response, "User transferred successfully")}
