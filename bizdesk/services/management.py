from typing import Any, Dict
import json
import logging
from bizdesk.core.endpoints import API_ENDPOINTS, endpoint
from bizdesk.core.pagination import paginate, pagination_from_response
from bizdesk.schemas.common import Page, Pagination
from bizdesk.schemas.management import Branch, Tenant, UserEntity
from bizdesk.services.base import ResourceService, unwrap_list

logger = logging.getLogger(__name__)


class PaginatedResourceService(ResourceService):
    """Resources whose index endpoint pages on the server and answers {<list_key>: [...], pagination: {...}}."""

    def list_page(self, page: int = 1, per_page: int = 10, search: str = "") -> Page:
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        if search.strip():
            params["search"] = search.strip()
        response = self.client.get(self.endpoints["BASE"], params=params)
        items = self._parse_many(unwrap_list(response, self.list_key))
        raw_pagination = response.get("pagination") if isinstance(response, dict) else None
        if raw_pagination is None:
            return Page(items=items, pagination=Pagination(current_page=page, per_page=per_page,
                                                           total=len(items), from_=1 if items else None,
                                                           to=len(items) or None))
        return Page(items=items, pagination=pagination_from_response(raw_pagination, page, per_page))


class BranchService(PaginatedResourceService):
    label = "branch"
    model = Branch
    endpoints = API_ENDPOINTS["BRANCHES"]
    list_key = "branches"
    item_key = "branch"

    def employees(self, id: int) -> Dict[str, Any]:
        response = self.client.get(endpoint(self.endpoints["EMPLOYEES"], id=id))
        return response if isinstance(response, dict) else {"users": response or []}

    def assign_user(self, branch_id: int, user_id: int) -> Any:
        return self.client.post(endpoint(self.endpoints["EMPLOYEES"], id=branch_id), json_body={"user_id": user_id})

    def remove_user(self, branch_id: int, user_id: int) -> Any:
        return self.client.delete(endpoint(self.endpoints["EMPLOYEE"], id=branch_id, user_id=user_id))

    def transfer_user(self, current_branch_id: int, new_branch_id: int, user_id: int) -> Any:
        path = endpoint(self.endpoints["TRANSFER"], id=current_branch_id, new_branch_id=new_branch_id)
        logger.info(f"Transferring user {user_id} from branch {current_branch_id} to {new_branch_id}")
        return self.client.post(path, json_body={"user_id": user_id})


class TenantService(PaginatedResourceService):
    label = "tenant"
    model = Tenant
    endpoints = API_ENDPOINTS["TENANTS"]
    list_key = "tenants"
    item_key = "tenant"

    def list_page(self, page: int = 1, per_page: int = 10, search: str = "") -> Page:
        params: Dict[str, Any] = {"page": page, "per_page": per_page}
        if search:
            params["search"] = search
        response = self.client.get(self.endpoints["BASE"], params=params)
        tenants = self._parse_many(unwrap_list(response, self.list_key))
        if isinstance(response, dict) and response.get("pagination"):
            return Page(items=tenants, pagination=pagination_from_response(response["pagination"], page, per_page))
        # older backends return every tenant; page locally
        return paginate(tenants, page, per_page)


class UserService(PaginatedResourceService):
    label = "user"
    model = UserEntity
    endpoints = API_ENDPOINTS["USERS"]
    list_key = "users"
    item_key = "user"

    def create(self, payload: Dict[str, Any]) -> Any:
        picture = payload.get("profile_picture")
        if picture is None:
            return super().create(payload)
        rest = {k: v for k, v in payload.items() if k != "profile_picture"}
        return self.client.post(self.endpoints["BASE"], data=[("user", json.dumps(rest))],
                                files=[("profile_picture", picture)])

    def update(self, id: int, payload: Dict[str, Any]) -> Any:
        picture = payload.get("profile_picture")
        if picture is None:
            return super().update(id, payload)
        rest = {k: v for k, v in payload.items() if k != "profile_picture"}
        fields = [("user", json.dumps(rest)), ("_method", "PATCH")]
        logger.info(f"Updating user {id} with a new profile picture")
        return self.client.post(endpoint(self.endpoints["UPDATE"], id=id), data=fields,
                                files=[("profile_picture", picture)])
