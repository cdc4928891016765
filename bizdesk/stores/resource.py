"""
Per-module data stores.

A store owns the list a dashboard page shows for one module: loading/error
state, a TTL cache keyed by the selected branch, and the create/update/delete
operations that invalidate the cache and refetch. Stores follow the workspace's
branch and tenant: a branchChanged/tenantChanged event clears the cache and,
for stores that were already loaded, refetches.
"""
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional
import logging
import time
from pydantic import BaseModel
from bizdesk.core.cache import TTLCache, DEFAULT_TTL
from bizdesk.core.context import ContextStore
from bizdesk.core.errors import ApiError, FormErrors, ResourceNotFound, extract_field_errors, error_message
from bizdesk.core.events import EventBus, BRANCH_CHANGED, TENANT_CHANGED
from bizdesk.core.pagination import paginate, search_filter
from bizdesk.schemas.common import Page

logger = logging.getLogger(__name__)

NO_BRANCH_MESSAGE = "No branch context available"


class StoreState(BaseModel):
    items: List[Any] = []
    loading: bool = False
    error: Optional[str] = None
    error_status: Optional[int] = None


class BaseStore:
    def __init__(self, name: str, label: str, service, context: ContextStore, events: EventBus,
                 ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic,
                 max_entries: Optional[int] = None):
        self.name = name
        self.label = label
        self.service = service
        self.context = context
        self.cache = TTLCache(name, ttl=ttl, max_entries=max_entries, clock=clock)
        self.items: List[Any] = []
        self.loading = False
        self.error: Optional[str] = None
        self.error_status: Optional[int] = None
        self.loaded_once = False
        self._mutation_listeners: List[Callable[[], None]] = []

        events.subscribe(BRANCH_CHANGED, self._on_context_changed)
        events.subscribe(TENANT_CHANGED, self._on_context_changed)

    def snapshot(self) -> StoreState:
        return StoreState(items=list(self.items), loading=self.loading,
                          error=self.error, error_status=self.error_status)

    def invalidate(self):
        self.cache.invalidate()

    def on_mutation(self, listener: Callable[[], None]):
        self._mutation_listeners.append(listener)

    def _notify_mutation(self):
        for listener in self._mutation_listeners:
            listener()

    def _fail(self, message: str, status: Optional[int]):
        self.error = message
        self.error_status = status
        self.items = []

    def _on_context_changed(self, detail: Any):
        logger.info(f"Context changed, refreshing {self.name} data...")
        self.invalidate()
        if self.loaded_once:
            self.reload_current()

    def reload_current(self):
        raise NotImplementedError

    # Mutations
    def create(self, payload: Dict[str, Any]) -> Any:
        try:
            response = self.service.create(payload)
        except ApiError as e:
            logger.error(f"Error creating {self.label}: {e.data}")
            raise FormErrors(extract_field_errors(e, f"Failed to create {self.label}."))
        self._after_mutation()
        return response

    def update(self, id: int, payload: Dict[str, Any]) -> Any:
        try:
            response = self.service.update(id, payload)
        except ApiError as e:
            logger.error(f"Error updating {self.label} {id}: {e.data}")
            raise FormErrors(extract_field_errors(e, f"Failed to update {self.label}."))
        self._after_mutation()
        return response

    def delete(self, id: int) -> Any:
        try:
            response = self.service.delete(id)
        except ApiError as e:
            if e.status == 404:
                logger.warning(f"{self.label} {id} not found on delete, refreshing list")
                self._after_mutation()
                raise ResourceNotFound(f"{self.label.capitalize()} not found. It may have already been deleted.")
            logger.error(f"Error deleting {self.label} {id}: {e.data}")
            raise FormErrors({"general": e.message or f"Failed to delete {self.label}."})
        self._after_mutation()
        return response

    def _after_mutation(self):
        self.invalidate()
        self.reload_current()
        self._notify_mutation()


class ResourceStore(BaseStore):
    """
    Keeps one list per module in a single-slot cache keyed by branch id.
    Paging and search happen over the cached list.
    """

    def __init__(self, name: str, label: str, service, context: ContextStore, events: EventBus,
                 requires_branch: bool = True, branch_param: Optional[str] = None,
                 search_fields: Optional[Callable[[Any], Iterable[Optional[str]]]] = None, **kwargs):
        kwargs.setdefault("max_entries", 1)
        super().__init__(name, label, service, context, events, **kwargs)
        self.requires_branch = requires_branch
        self.branch_param = branch_param
        self.search_fields = search_fields

    def _fetch(self, branch_id: Optional[int]) -> List[Any]:
        if self.branch_param and branch_id is not None:
            return self.service.list(**{self.branch_param: branch_id})
        return self.service.list()

    def load(self, force: bool = False) -> List[Any]:
        self.loading = True
        self.error = None
        self.error_status = None
        try:
            branch_id = self.context.branch_id()
            if self.requires_branch and branch_id is None:
                self._fail(NO_BRANCH_MESSAGE, 400)
                return self.items

            key: Hashable = branch_id
            if not force:
                cached = self.cache.get(key)
                if cached is not None:
                    self.items = cached
                    return self.items

            data = self._fetch(branch_id)
            self.cache.set(key, data)
            self.items = data
            self.loaded_once = True
            return self.items
        except ApiError as e:
            logger.error(f"Error loading {self.name}: {e}")
            self._fail(error_message(e, f"Failed to load {self.name}"), e.status or 502)
            return self.items
        finally:
            self.loading = False

    def refresh(self) -> List[Any]:
        self.invalidate()
        return self.load()

    def reload_current(self):
        self.load()

    def page(self, page: int = 1, per_page: int = 10, search: str = "", force: bool = False) -> Page:
        items = self.load(force=force)
        if self.search_fields is not None:
            items = search_filter(items, search, self.search_fields)
        return paginate(items, page, per_page)


class PagedResourceStore(BaseStore):
    """
    Caches one page per (branch, page, per_page, search).

    With `server_side=True` the service pages (`list_page`); otherwise the whole
    list is fetched and filtered/sliced here.
    """

    def __init__(self, name: str, label: str, service, context: ContextStore, events: EventBus,
                 server_side: bool = True, requires_branch: bool = False,
                 search_fields: Optional[Callable[[Any], Iterable[Optional[str]]]] = None,
                 default_per_page: int = 10, **kwargs):
        super().__init__(name, label, service, context, events, **kwargs)
        self.server_side = server_side
        self.requires_branch = requires_branch
        self.search_fields = search_fields
        self.default_per_page = default_per_page
        self.current_query = (1, default_per_page, "")
        self.current_page: Optional[Page] = None

    def _fetch_page(self, page: int, per_page: int, search: str) -> Page:
        if self.server_side:
            return self.service.list_page(page=page, per_page=per_page, search=search)
        items = self.service.list()
        if self.search_fields is not None:
            items = search_filter(items, search, self.search_fields)
        return paginate(items, page, per_page)

    def page(self, page: int = 1, per_page: Optional[int] = None, search: str = "",
             force: bool = False) -> Page:
        per_page = per_page or self.default_per_page
        self.current_query = (page, per_page, search)
        self.loading = True
        self.error = None
        self.error_status = None
        try:
            branch_id = self.context.branch_id()
            if self.requires_branch and branch_id is None:
                self._fail(NO_BRANCH_MESSAGE, 400)
                self.current_page = paginate([], 1, per_page)
                return self.current_page

            key = (branch_id, page, per_page, search)
            if not force:
                cached = self.cache.get(key)
                if cached is not None:
                    self.current_page = cached
                    self.items = list(cached.items)
                    return cached

            result = self._fetch_page(page, per_page, search)
            self.cache.set(key, result)
            self.current_page = result
            self.items = list(result.items)
            self.loaded_once = True
            return result
        except ApiError as e:
            logger.error(f"Error loading {self.name}: {e}")
            self._fail(error_message(e, f"Failed to load {self.name}"), e.status or 502)
            self.current_page = paginate([], 1, per_page)
            return self.current_page
        finally:
            self.loading = False

    def refresh(self) -> Page:
        self.invalidate()
        page, per_page, search = self.current_query
        return self.page(page, per_page, search)

    def reload_current(self):
        page, per_page, search = self.current_query
        self.page(page, per_page, search)
