from typing import Optional
from fastapi import APIRouter, Depends, Query
from bizdesk.api.deps import current_workspace
from bizdesk.api.responses import page_response, store_error_response
from bizdesk.stores.workspace import Workspace

router = APIRouter(tags=["activity-logs"])


@router.get("/activity-logs")
def list_activity_logs(
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1),
    search: str = "",
    refresh: bool = False,
    workspace: Workspace = Depends(current_workspace),
):
    store = workspace.activity_logs
    result = store.page(page, per_page, search, force=refresh)
    return store_error_response(store) or page_response(result)
