from typing import List
from fastapi import Body, Depends
from bizdesk.api.crud import build_router
from bizdesk.api.deps import current_workspace
from bizdesk.forms.schedule import ScheduleForm
from bizdesk.services.base import response_message
from bizdesk.stores.workspace import Workspace

router = build_router("schedules", "schedule", ScheduleForm)


@router.put("/{record_id}/employees")
def assign_employees(record_id: int, user_ids: List[str] = Body(..., embed=True),
                     workspace: Workspace = Depends(current_workspace)):
    response = workspace.schedules.service.assign_employees(record_id, user_ids)
    workspace.schedules.invalidate()
    workspace.activity_logs.invalidate()
    return {"message": response_message(response, "Employees assigned successfully")}
