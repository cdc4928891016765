from typing import Optional
from fastapi import APIRouter, Depends
from bizdesk.api.deps import current_workspace
from bizdesk.schemas.context import BranchContext, DefaultCurrency, TenantContext
from bizdesk.stores.workspace import Workspace

router = APIRouter(prefix="/context", tags=["context"])


def _dump(model) -> Optional[dict]:
    return model.model_dump() if model is not None else None


@router.get("/branch")
def get_branch(workspace: Workspace = Depends(current_workspace)):
    return {"data": _dump(workspace.context.get_branch())}


@router.put("/branch")
def set_branch(branch: BranchContext, workspace: Workspace = Depends(current_workspace)):
    changed = workspace.context.set_branch(branch)
    return {"data": branch.model_dump(), "changed": changed}


@router.put("/tenant")
def set_tenant(tenant: TenantContext, workspace: Workspace = Depends(current_workspace)):
    workspace.context.set_tenant(tenant)
    return {"data": tenant.model_dump()}


@router.get("/currency")
def get_currency(workspace: Workspace = Depends(current_workspace)):
    return {"data": _dump(workspace.context.get_default_currency())}


@router.put("/currency")
def set_currency(currency: DefaultCurrency, workspace: Workspace = Depends(current_workspace)):
    workspace.context.set_default_currency(currency)
    return {"data": currency.model_dump()}


@router.delete("/currency")
def clear_currency(workspace: Workspace = Depends(current_workspace)):
    workspace.context.set_default_currency(None)
    return {"data": None}
