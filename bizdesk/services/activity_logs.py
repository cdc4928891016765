from typing import Any, Dict
from bizdesk.core.endpoints import API_ENDPOINTS
from bizdesk.core.http import ApiClient
from bizdesk.core.pagination import pagination_from_response
from bizdesk.schemas.activity_log import ActivityLog
from bizdesk.schemas.common import Page


class ActivityLogService:
    """Read-only. The backend answers {message, data: <Laravel paginator>}."""

    label = "activity log"

    def __init__(self, client: ApiClient):
        self.client = client

    def list_page(self, page: int = 1, per_page: int = 15, search: str = "") -> Page:
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        if search:
            params["search"] = search
        response = self.client.get(API_ENDPOINTS["ACTIVITY_LOGS"]["ALL"], params=params)
        paginator = response.get("data") if isinstance(response, dict) else None
        if not isinstance(paginator, dict):
            paginator = {}
        raw_logs = paginator.get("data")
        logs = [ActivityLog.model_validate(item) for item in (raw_logs if isinstance(raw_logs, list) else [])]
        return Page(items=logs, pagination=pagination_from_response(paginator, page, per_page))
