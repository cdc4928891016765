from typing import Any, Callable, Dict, Optional
import logging
import threading
import time
import requests
from bizdesk.core.config import settings
from bizdesk.core.context import ContextStore
from bizdesk.core.events import EventBus
from bizdesk.core.http import ApiClient
from bizdesk.db.memory import LocalStorage, WORKSPACES
from bizdesk.services.activity_logs import ActivityLogService
from bizdesk.services.customers import CustomerService
from bizdesk.services.deductions import CashAdvanceService, LoanService
from bizdesk.services.discounts import DiscountService
from bizdesk.services.expenses import ExpenseService
from bizdesk.services.management import BranchService, TenantService, UserService
from bizdesk.services.roles import RoleService
from bizdesk.services.schedules import ScheduleService
from bizdesk.stores.resource import BaseStore, ResourceStore, PagedResourceStore

logger = logging.getLogger(__name__)

_workspaces_lock = threading.Lock()


def _cash_advance_fields(ca):
    email = ca.user_info.user.email if ca.user_info and ca.user_info.user else None
    return [ca.code, ca.employee_name, email, ca.description, ca.status]


def _loan_fields(loan):
    email = loan.employee.email if loan.employee else None
    return [loan.code, loan.employee_name, email, loan.loan_type, loan.status, loan.remarks]


class Workspace:
    """
    Everything one tenant's dashboard session holds: stored context, event bus,
    API client and one store per module.
    """

    def __init__(self, tenant_key: str, session: Optional[requests.Session] = None,
                 clock: Callable[[], float] = time.monotonic, ttl: Optional[float] = None,
                 base_url: Optional[str] = None):
        self.tenant_key = tenant_key
        self.storage = LocalStorage()
        self.events = EventBus()
        self.context = ContextStore(self.storage, self.events)
        self.client = ApiClient(base_url=base_url, session=session, context=self.context)

        ttl = settings.CACHE_TTL_SECONDS if ttl is None else ttl
        common = dict(context=self.context, events=self.events, ttl=ttl, clock=clock)

        self.activity_logs = PagedResourceStore(
            "activity logs", "activity log", ActivityLogService(self.client),
            default_per_page=settings.ACTIVITY_LOG_PAGE_SIZE, **common)

        self.customers = ResourceStore(
            "customers", "customer", CustomerService(self.client), branch_param="branch_id",
            search_fields=lambda c: [c.first_name, c.last_name, c.email, c.phone_number], **common)
        self.expenses = ResourceStore(
            "expenses", "expense", ExpenseService(self.client), requires_branch=False,
            search_fields=lambda e: [e.name, e.area_of_expense, e.description, e.branch_name], **common)
        self.discounts = ResourceStore(
            "discounts", "discount", DiscountService(self.client), requires_branch=False,
            search_fields=lambda d: [d.name, d.classification], **common)
        self.schedules = ResourceStore(
            "schedules", "schedule", ScheduleService(self.client), requires_branch=False,
            search_fields=lambda s: [s.name, s.branch], **common)
        self.roles = ResourceStore(
            "roles", "role", RoleService(self.client), requires_branch=False,
            search_fields=lambda r: [r.name, r.description], **common)

        self.cash_advances = PagedResourceStore(
            "cash advances", "cash advance", CashAdvanceService(self.client), server_side=False,
            search_fields=_cash_advance_fields, default_per_page=settings.DEFAULT_PAGE_SIZE, **common)
        self.loans = PagedResourceStore(
            "loans", "loan", LoanService(self.client), server_side=False,
            search_fields=_loan_fields, default_per_page=settings.DEFAULT_PAGE_SIZE, **common)

        self.branches = PagedResourceStore(
            "branches", "branch", BranchService(self.client),
            default_per_page=settings.DEFAULT_PAGE_SIZE, **common)
        self.tenants = PagedResourceStore(
            "tenants", "tenant", TenantService(self.client),
            default_per_page=settings.DEFAULT_PAGE_SIZE, **common)
        self.users = PagedResourceStore(
            "users", "user", UserService(self.client),
            default_per_page=settings.DEFAULT_PAGE_SIZE, **common)

        self.stores: Dict[str, BaseStore] = {
            "customers": self.customers,
            "expenses": self.expenses,
            "discounts": self.discounts,
            "schedules": self.schedules,
            "roles": self.roles,
            "cash-advances": self.cash_advances,
            "loans": self.loans,
            "branches": self.branches,
            "tenants": self.tenants,
            "users": self.users,
        }
        # Every mutation may have written an activity log entry upstream
        for store in self.stores.values():
            store.on_mutation(self.activity_logs.invalidate)

    def store(self, module: str) -> BaseStore:
        return self.stores[module]


def get_workspace(tenant_key: str, **kwargs: Any) -> Workspace:
    with _workspaces_lock:
        workspace = WORKSPACES.get(tenant_key)
        if workspace is None:
            logger.info(f"Creating workspace for tenant: {tenant_key}")
            workspace = Workspace(tenant_key, **kwargs)
            WORKSPACES[tenant_key] = workspace
    return workspace
