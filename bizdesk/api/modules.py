from typing import Any, Dict, Optional
from bizdesk.api.crud import build_router
from bizdesk.forms.customer import CustomerForm
from bizdesk.forms.deduction import CashAdvanceForm, LoanForm
from bizdesk.forms.discount import DiscountForm
from bizdesk.forms.management import BranchForm, RoleForm, TenantForm, UserForm
from bizdesk.stores.workspace import Workspace


def role_names(workspace: Workspace, record_id: Optional[int]) -> Dict[str, Any]:
    return {"existing": workspace.roles.load(), "exclude_id": record_id}


customers = build_router("customers", "customer", CustomerForm)
cash_advances = build_router("cash-advances", "cash advance", CashAdvanceForm)
loans = build_router("loans", "loan", LoanForm)
discounts = build_router("discounts", "discount", DiscountForm)
branches = build_router("branches", "branch", BranchForm, item_key="branch")
tenants = build_router("tenants", "tenant", TenantForm, item_key="tenant")
users = build_router("users", "user", UserForm, item_key="user")
roles = build_router("roles", "role", RoleForm, validation_context=role_names)

routers = [customers, cash_advances, loans, discounts, branches, tenants, users, roles]
