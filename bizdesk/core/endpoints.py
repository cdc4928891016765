from typing import Any

# Upstream routes (Laravel). Placeholders use {name} and are filled by endpoint().
API_ENDPOINTS = {
    "CUSTOMERS": {
        "BASE": "/customers",
        "GET": "/customers/{id}",
        "UPDATE": "/customers/{id}",
        "DELETE": "/customers/{id}",
    },
    "EXPENSES": {
        "BASE": "/expenses",
        "GET": "/expenses/{id}",
        "UPDATE": "/expenses/{id}",
        "DELETE": "/expenses/{id}",
    },
    "DEDUCTIONS": {
        "CASH_ADVANCE": {
            "BASE": "/hrms/deductions/cash-advances",
            "GET": "/hrms/deductions/cash-advances/{id}",
            "UPDATE": "/hrms/deductions/cash-advances/{id}",
            "DELETE": "/hrms/deductions/cash-advances/{id}",
        },
        "LOAN": {
            "BASE": "/hrms/deductions/loans",
            "GET": "/hrms/deductions/loans/{id}",
            "UPDATE": "/hrms/deductions/loans/{id}",
            "DELETE": "/hrms/deductions/loans/{id}",
        },
    },
    "BRANCHES": {
        "BASE": "/management/branches",
        "GET": "/management/branches/{id}",
        "UPDATE": "/management/branches/{id}",
        "DELETE": "/management/branches/{id}",
        "EMPLOYEES": "/management/branches/{id}/users",
        "EMPLOYEE": "/management/branches/{id}/users/{user_id}",
        "TRANSFER": "/management/branches/{id}/users/transfer/{new_branch_id}",
    },
    "TENANTS": {
        "BASE": "/management/tenants",
        "GET": "/management/tenants/{id}",
        "UPDATE": "/management/tenants/{id}",
        "DELETE": "/management/tenants/{id}",
    },
    "ROLES": {
        "BASE": "/management/roles",
        "GET": "/management/roles/{id}",
        "UPDATE": "/management/roles/{id}",
        "DELETE": "/management/roles/{id}",
    },
    "USERS": {
        "BASE": "/management/users",
        "GET": "/management/users/{id}",
        "UPDATE": "/management/users/{id}",
        "DELETE": "/management/users/{id}",
    },
    "ACTIVITY_LOGS": {
        "ALL": "/activity-logs",
    },
    "SCHEDULES": {
        "BASE": "/hrms/dtr/configuration/schedules",
        "STORE": "/hrms/dtr/configuration/store",
        "GET": "/hrms/dtr/configuration/schedules/{id}",
        "UPDATE": "/hrms/dtr/configuration/schedules/{id}",
        "DELETE": "/hrms/dtr/configuration/schedules/{id}",
        "EMPLOYEES": "/hrms/dtr/configuration/schedules/{id}/employees",
    },
    "DISCOUNTS": {
        "BASE": "/inventory/discounts",
        "GET": "/inventory/discounts/{id}",
        "UPDATE": "/inventory/discounts/{id}",
        "DELETE": "/inventory/discounts/{id}",
    },
}


def endpoint(template: str, **params: Any) -> str:
    path = template
    for name, value in params.items():
        path = path.replace("{" + name + "}", str(value))
    if "{" in path:
        raise ValueError(f"Unfilled placeholder in endpoint '{path}'")
    return path
