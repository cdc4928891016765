from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from bizdesk.schemas.common import Page
from bizdesk.services.base import response_message, unwrap_item


def dump(item: Any) -> Any:
    return item.model_dump() if isinstance(item, BaseModel) else item


def page_response(page: Page) -> Dict[str, Any]:
    return {
        "data": [dump(item) for item in page.items],
        "pagination": page.pagination.model_dump(by_alias=True),
    }


def store_error_response(store) -> Optional[JSONResponse]:
    """The store swallowed a fetch error into its state; surface it to the caller."""
    state = store.snapshot()
    if not state.error:
        return None
    return JSONResponse(status_code=state.error_status or 502, content={"errors": {"general": state.error}})


def mutation_response(response: Any, default_message: str, key: str = "data") -> Dict[str, Any]:
    return {"message": response_message(response, default_message), "data": unwrap_item(response, key)}
