from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

BRANCH_CHANGED = "branchChanged"
TENANT_CHANGED = "tenantChanged"

Handler = Callable[[Any], None]


def open_add_modal_event(module: str) -> str:
    return f"open-add-{module}-modal"


class EventBus:
    """Synchronous pub/sub standing in for window-level custom events."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, event: str, handler: Handler):
        self._handlers.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Handler):
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, detail: Any = None) -> int:
        handlers = list(self._handlers.get(event, []))
        logger.debug(f"Emitting {event} to {len(handlers)} handler(s)")
        delivered = 0
        for handler in handlers:
            try:
                handler(detail)
                delivered += 1
            except Exception as e:
                logger.error(f"Handler for {event} failed: {e}")
        return delivered

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))
