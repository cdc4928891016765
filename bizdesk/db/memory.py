import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Key/value store holding JSON strings, one per workspace.
    Mirrors what the dashboard keeps in the browser (branch_context, default_currency).
    """

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str):
        self._items[key] = value

    def remove_item(self, key: str):
        self._items.pop(key, None)

    def get_json(self, key: str) -> Optional[Any]:
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.error(f"Stored value for '{key}' is not valid JSON, ignoring it")
            return None

    def set_json(self, key: str, value: Any):
        self.set_item(key, json.dumps(value))


# Workspace registry: { tenant_id: Workspace }
WORKSPACES: Dict[str, Any] = {}
