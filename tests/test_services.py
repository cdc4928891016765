import json
import pytest
from bizdesk.core.endpoints import endpoint
from bizdesk.core.http import ApiClient
from bizdesk.services.base import unwrap_list
from bizdesk.services.customers import CustomerService
from bizdesk.services.deductions import LoanService
from bizdesk.services.expenses import ExpenseService, build_form_fields
from bizdesk.services.management import BranchService, TenantService, UserService
from bizdesk.services.roles import RoleService
from bizdesk.services.schedules import ScheduleService
from bizdesk.services.activity_logs import ActivityLogService
from conftest import FakeSession, UPSTREAM, customer


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return ApiClient(base_url=UPSTREAM, session=session)


def test_unwrap_list_shapes():
    assert unwrap_list([1, 2]) == [1, 2]
    assert unwrap_list({"data": [1]}) == [1]
    assert unwrap_list({"data": {"data": [3], "total": 1}}) == [3]
    assert unwrap_list({"branches": [4]}, "branches") == [4]
    assert unwrap_list({"message": "ok"}) == []
    assert unwrap_list(None) == []


def test_endpoint_requires_all_placeholders():
    assert endpoint("/customers/{id}", id=5) == "/customers/5"
    with pytest.raises(ValueError):
        endpoint("/management/branches/{id}/users/{user_id}", id=1)


def test_customer_list_drops_empty_filters(session, client):
    session.add("GET", "/customers", {"message": "ok", "data": [customer(1)]})

    result = CustomerService(client).list(search="", branch_id=3)

    assert [c.full_name for c in result] == ["Ana Cruz"]
    assert session.calls[0]["params"] == {"branch_id": 3}


def test_roles_accept_bare_list(session, client):
    session.add("GET", "/management/roles", [{"id": 1, "name": "Admin"}])
    assert [r.name for r in RoleService(client).list()] == ["Admin"]


def test_loan_update_uses_put(session, client):
    session.add("PUT", "/hrms/deductions/loans/8", {"message": "Loan updated"})
    LoanService(client).update(8, {"status": "active"})
    assert session.calls[0]["json"] == {"status": "active"}


def test_schedule_create_posts_to_store(session, client):
    session.add("POST", "/hrms/dtr/configuration/store", {"message": "Created"})
    session.add("PUT", "/hrms/dtr/configuration/schedules/2/employees", {"message": "Assigned"})
    service = ScheduleService(client)

    service.create({"schedule_name": "Day"})
    service.assign_employees(2, [5, "6"])

    assert session.calls[1]["json"] == {"user_ids": ["5", "6"]}


def test_expense_fields_are_indexed():
    fields, files = build_form_fields({
        "name": "Rent",
        "amount": 1500.0,
        "description": None,
        "attachment_ids_to_keep": [11, 12],
        "attachments": [("a.png", b"png", "image/png")],
    })
    assert ("name", "Rent") in fields
    assert ("amount", "1500.0") in fields
    assert ("attachment_ids_to_keep[0]", "11") in fields
    assert ("attachment_ids_to_keep[1]", "12") in fields
    assert all(key != "description" for key, _ in fields)
    assert files == [("attachments[0]", ("a.png", b"png", "image/png"))]


def test_expense_update_posts_with_method_override(session, client):
    session.add("POST", "/expenses/4", {"message": "Expense updated", "data": {"id": 4}})
    ExpenseService(client).update(4, {"name": "Rent"})
    call = session.calls[0]
    assert ("_method", "PATCH") in call["data"]
    assert call["files"] is None


def test_branch_pagination_from_backend(session, client):
    session.add("GET", "/management/branches", {
        "branches": [{"id": 1, "name": "Main"}],
        "pagination": {"current_page": 1, "last_page": 3, "per_page": 1, "total": 3},
    })
    page = BranchService(client).list_page(1, 1, " main ")
    assert page.items[0].name == "Main"
    assert page.pagination.last_page == 3
    assert session.calls[0]["params"] == {"page": 1, "per_page": 1, "search": "main"}


def test_tenants_without_pagination_are_paged_locally(session, client):
    session.add("GET", "/management/tenants", {"tenants": [{"id": i, "name": f"T{i}"} for i in range(1, 13)]})
    page = TenantService(client).list_page(2, 10)
    assert [t.id for t in page.items] == [11, 12]
    assert page.pagination.total == 12


def test_user_with_picture_goes_multipart(session, client):
    session.add("POST", "/management/users", {"message": "Created"})
    picture = ("me.png", b"png", "image/png")
    UserService(client).create({"email": "a@b.co", "profile_picture": picture})

    call = session.calls[0]
    assert json.loads(dict(call["data"])["user"]) == {"email": "a@b.co"}
    assert call["files"] == [("profile_picture", picture)]


def test_branch_transfer_path(session, client):
    session.add("POST", "/management/branches/1/users/transfer/2", {"message": "Transferred"})
    BranchService(client).transfer_user(1, 2, 7)
    assert session.calls[0]["json"] == {"user_id": 7}


def test_activity_logs_read_laravel_paginator(session, client):
    session.add("GET", "/activity-logs", {"message": "ok", "data": {
        "current_page": 1, "last_page": 2, "per_page": 15, "total": 16, "from": 1, "to": 15,
        "data": [{"module": "Customers", "activity": "created", "created_at": "2024-01-01"}],
    }})
    page = ActivityLogService(client).list_page(1, 15, "cust")
    assert page.items[0].module == "Customers"
    assert page.pagination.total == 16
    assert session.calls[0]["params"]["search"] == "cust"
