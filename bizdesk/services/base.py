from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging
from pydantic import BaseModel
from bizdesk.core.endpoints import endpoint
from bizdesk.core.http import ApiClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def unwrap_list(response: Any, key: str = "data") -> List[Any]:
    """
    Pull the item list out of the backend envelope. Accepts a bare list,
    {key: [...]}, or a Laravel paginator {key: {"data": [...]}}.
    """
    if isinstance(response, list):
        return response
    if not isinstance(response, dict):
        return []
    data = response.get(key)
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("data"), list):
        return data["data"]
    return []


def unwrap_item(response: Any, key: str = "data") -> Any:
    if isinstance(response, dict) and key in response and response[key] is not None:
        return response[key]
    return response


class ResourceService(Generic[M]):
    """
    CRUD verbs for one REST resource. Subclasses set the endpoint group,
    the model, the envelope keys and the update verb.
    """

    label: str = "record"
    model: Type[M]
    endpoints: Dict[str, str]
    list_key: str = "data"
    item_key: str = "data"
    update_method: str = "PATCH"

    def __init__(self, client: ApiClient):
        self.client = client

    def _parse(self, raw: Any) -> M:
        return self.model.model_validate(raw)

    def _parse_many(self, raw_items: List[Any]) -> List[M]:
        return [self._parse(item) for item in raw_items]

    def list(self, **params: Any) -> List[M]:
        query = {k: v for k, v in params.items() if v not in (None, "")}
        response = self.client.get(self.endpoints["BASE"], params=query or None)
        return self._parse_many(unwrap_list(response, self.list_key))

    def get(self, id: int) -> M:
        response = self.client.get(endpoint(self.endpoints["GET"], id=id))
        return self._parse(unwrap_item(response, self.item_key))

    def create(self, payload: Dict[str, Any]) -> Any:
        response = self.client.post(self.endpoints.get("CREATE", self.endpoints["BASE"]), json_body=payload)
        logger.info(f"Created {self.label}")
        return response

    def update(self, id: int, payload: Dict[str, Any]) -> Any:
        response = self.client.request(self.update_method, endpoint(self.endpoints["UPDATE"], id=id),
                                       json_body=payload)
        logger.info(f"Updated {self.label} {id}")
        return response

    def delete(self, id: int) -> Any:
        response = self.client.delete(endpoint(self.endpoints["DELETE"], id=id))
        logger.info(f"Deleted {self.label} {id}")
        return response


def response_message(response: Any, default: Optional[str] = None) -> Optional[str]:
    if isinstance(response, dict) and response.get("message"):
        return str(response["message"])
    return default
