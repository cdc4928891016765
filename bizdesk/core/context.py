from typing import Optional
import logging
from bizdesk.db.memory import LocalStorage
from bizdesk.core.events import EventBus, BRANCH_CHANGED, TENANT_CHANGED
from bizdesk.schemas.context import TenantContext, BranchContext, DefaultCurrency

logger = logging.getLogger(__name__)

TENANT_KEY = "tenant_context"
BRANCH_KEY = "branch_context"
CURRENCY_KEY = "default_currency"


class ContextStore:
    """Selected tenant/branch and default currency for one workspace."""

    def __init__(self, storage: LocalStorage, events: EventBus):
        self.storage = storage
        self.events = events

    # Tenant
    def get_tenant(self) -> Optional[TenantContext]:
        data = self.storage.get_json(TENANT_KEY)
        return TenantContext(**data) if data else None

    def set_tenant(self, tenant: TenantContext):
        previous = self.get_tenant()
        self.storage.set_json(TENANT_KEY, tenant.model_dump())
        if previous is None or previous.id != tenant.id:
            logger.info(f"Tenant context switched to {tenant.id} ({tenant.name})")
            self.events.emit(TENANT_CHANGED, tenant.model_dump())

    # Branch
    def get_branch(self) -> Optional[BranchContext]:
        data = self.storage.get_json(BRANCH_KEY)
        return BranchContext(**data) if data else None

    def branch_id(self) -> Optional[int]:
        branch = self.get_branch()
        return branch.id if branch else None

    def set_branch(self, branch: BranchContext) -> bool:
        """Store the branch; returns True (and emits branchChanged) when the id changed."""
        previous_id = self.branch_id()
        self.storage.set_json(BRANCH_KEY, branch.model_dump())
        if previous_id == branch.id:
            return False
        logger.info(f"Branch context switched from {previous_id} to {branch.id} ({branch.name})")
        self.events.emit(BRANCH_CHANGED, branch.model_dump())
        return True

    def clear(self):
        self.storage.remove_item(TENANT_KEY)
        self.storage.remove_item(BRANCH_KEY)

    # Currency
    def get_default_currency(self) -> Optional[DefaultCurrency]:
        data = self.storage.get_json(CURRENCY_KEY)
        return DefaultCurrency(**data) if data else None

    def set_default_currency(self, currency: Optional[DefaultCurrency]):
        if currency is None:
            self.storage.remove_item(CURRENCY_KEY)
        else:
            self.storage.set_json(CURRENCY_KEY, currency.model_dump())
