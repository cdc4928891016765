"""
Router factory for the dashboard modules.

Each module gets the same list/read/create/update/delete surface; the module
decides which form validates its input and which store backs it.
"""
from typing import Any, Callable, Dict, Optional, Type
import logging
from fastapi import APIRouter, Body, Depends, Query
from bizdesk.api.deps import current_workspace
from bizdesk.api.responses import dump, mutation_response, page_response, store_error_response
from bizdesk.core.config import settings
from bizdesk.core.errors import FormErrors
from bizdesk.forms.base import Form
from bizdesk.services.base import response_message
from bizdesk.stores.workspace import Workspace

logger = logging.getLogger(__name__)

# (workspace, id of the record being edited or None) -> extra validate_form kwargs
ValidationContext = Callable[[Workspace, Optional[int]], Dict[str, Any]]


def validate_and_prepare(form: Form, workspace: Workspace, record_id: Optional[int] = None,
                         extra: Optional[ValidationContext] = None) -> Dict[str, Any]:
    is_edit = record_id is not None
    branch = workspace.context.get_branch()
    kwargs = extra(workspace, record_id) if extra else {}
    form.apply_defaults(is_edit=is_edit)
    errors = form.validate_form(is_edit=is_edit, branch=branch, **kwargs)
    if errors:
        raise FormErrors(errors)
    return form.prepare_submit_data(branch=branch, is_edit=is_edit)


def build_router(module: str, label: str, form_cls: Optional[Type[Form]] = None,
                 item_key: str = "data", validation_context: Optional[ValidationContext] = None) -> APIRouter:
    """
    `form_cls=None` leaves out POST/PUT so the module can declare its own
    (multipart bodies, for instance).
    """
    router = APIRouter(prefix=f"/{module}", tags=[module])

    @router.get("")
    def list_items(
        page: int = Query(1, ge=1),
        per_page: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
        search: str = "",
        refresh: bool = False,
        workspace: Workspace = Depends(current_workspace),
    ):
        store = workspace.store(module)
        result = store.page(page, per_page, search, force=refresh)
        return store_error_response(store) or page_response(result)

    @router.get("/{record_id}")
    def get_item(record_id: int, workspace: Workspace = Depends(current_workspace)):
        return {"data": dump(workspace.store(module).service.get(record_id))}

    if form_cls is not None:
        @router.post("", status_code=201)
        def create_item(payload: Dict[str, Any] = Body(...), workspace: Workspace = Depends(current_workspace)):
            form = form_cls.parse(payload)
            data = validate_and_prepare(form, workspace, extra=validation_context)
            response = workspace.store(module).create(data)
            return mutation_response(response, f"{label.capitalize()} created successfully", item_key)

        @router.put("/{record_id}")
        def update_item(record_id: int, payload: Dict[str, Any] = Body(...),
                        workspace: Workspace = Depends(current_workspace)):
            form = form_cls.parse(payload)
            data = validate_and_prepare(form, workspace, record_id, extra=validation_context)
            response = workspace.store(module).update(record_id, data)
            return mutation_response(response, f"{label.capitalize()} updated successfully", item_key)

    @router.delete("/{record_id}")
    def delete_item(record_id: int, workspace: Workspace = Depends(current_workspace)):
        response = workspace.store(module).delete(record_id)
        logger.info(f"Deleted {label} {record_id} for tenant {workspace.tenant_key}")
        return {"message": response_message(response, f"{label.capitalize()} deleted successfully")}

    return router
