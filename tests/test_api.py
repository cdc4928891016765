from fastapi.testclient import TestClient
from bizdesk.main import app
from bizdesk.core.audit import audit_repo
from bizdesk.schemas.context import BranchContext
from bizdesk.stores.resource import NO_BRANCH_MESSAGE
from conftest import customer

client = TestClient(app)

HEADERS = {"X-Tenant-ID": "tenant-1"}


def test_missing_tenant_header_is_rejected():
    audit_repo.clear()
    response = client.get("/customers")

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing tenant identifier"
    assert audit_repo.get_all()[-1].tenant_id == "MISSING"


def test_health_is_public():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_without_branch_reports_error(workspace):
    response = client.get("/customers", headers=HEADERS)
    assert response.status_code == 400
    assert response.json() == {"errors": {"general": NO_BRANCH_MESSAGE}}


def test_list_pages_cached_customers(workspace, session):
    session.add("GET", "/customers", {"data": [customer(i, f"Name{i}") for i in range(1, 4)]})
    client.put("/context/branch", json={"id": 1, "name": "Main"}, headers=HEADERS)

    response = client.get("/customers?page=2&per_page=2", headers=HEADERS)

    body = response.json()
    assert response.status_code == 200
    assert [c["id"] for c in body["data"]] == [3]
    assert body["pagination"]["from"] == 3
    assert body["pagination"]["last_page"] == 2

    client.get("/customers?search=name1", headers=HEADERS)
    assert len(session.calls_to("GET", "/customers")) == 1

    client.get("/customers?refresh=true", headers=HEADERS)
    assert len(session.calls_to("GET", "/customers")) == 2


def test_create_validates_before_calling_upstream(workspace, session):
    response = client.post("/customers", json={"first_name": "", "email": "bad"}, headers=HEADERS)

    assert response.status_code == 422
    assert response.json()["errors"]["first_name"] == "First name is required"
    assert session.calls_to("POST", "/customers") == []


def test_create_customer(workspace, session):
    workspace.context.set_branch(BranchContext(id=5, name="Main"))
    session.add("POST", "/customers", {"message": "Customer created", "data": customer(9)})
    session.add("GET", "/customers", {"data": [customer(9)]})

    response = client.post("/customers", json={"first_name": "Ana", "phone_number": "639170000000"},
                           headers=HEADERS)

    assert response.status_code == 201
    assert response.json()["message"] == "Customer created"
    sent = session.calls_to("POST", "/customers")[0]["json"]
    assert sent["branch_id"] == 5
    assert sent["phone_number"] == "+639170000000"


def test_upstream_field_errors_come_back_as_422(workspace, session):
    session.add("POST", "/management/tenants",
                {"message": "Invalid", "errors": {"email": ["The email has already been taken."]}}, status=422)

    response = client.post("/tenants", json={"name": "Acme", "email": "a@acme.co", "phone": "123"},
                           headers=HEADERS)

    assert response.status_code == 422
    assert response.json() == {"errors": {"email": "The email has already been taken."}}


def test_delete_already_deleted(workspace, session):
    session.add("DELETE", "/inventory/discounts/5", {"message": "Not found"}, status=404)
    session.add("GET", "/inventory/discounts", {"data": []})

    response = client.delete("/discounts/5", headers=HEADERS)

    assert response.status_code == 404
    assert response.json() == {"errors": {"general": "Discount not found. It may have already been deleted."}}


def test_upstream_failure_on_read(workspace, session):
    session.add("GET", "/management/roles/3", {"message": "Server Error"}, status=500)

    response = client.get("/roles/3", headers=HEADERS)

    assert response.status_code == 500
    assert response.json() == {"errors": {"general": "Server Error"}}


def test_duplicate_role_name(workspace, session):
    session.add("GET", "/management/roles", [{"id": 1, "name": "Admin"}])

    response = client.post("/roles", json={"name": "ADMIN", "description": "Everything"}, headers=HEADERS)

    assert response.status_code == 422
    assert response.json()["errors"] == {"name": "Role name already exists"}


def test_authorization_is_forwarded(workspace, session):
    session.add("GET", "/inventory/discounts", {"data": []})

    client.get("/discounts", headers={**HEADERS, "Authorization": "Bearer tok-123"})

    assert session.calls[0]["headers"]["Authorization"] == "Bearer tok-123"


def test_expense_upload_is_multipart(workspace, session):
    workspace.context.set_branch(BranchContext(id=2, name="North"))
    session.add("POST", "/expenses", {"message": "Expense created", "data": {"id": 1}})
    session.add("GET", "/expenses", {"data": []})

    response = client.post(
        "/expenses",
        data={"name": "Rent", "area_of_expense": "Office", "amount": "250", "expense_date": "2024-05-01"},
        files={"attachments": ("receipt.pdf", b"%PDF-1.4", "application/pdf")},
        headers=HEADERS,
    )

    assert response.status_code == 201
    call = session.calls_to("POST", "/expenses")[0]
    assert ("branch_id", "2") in call["data"]
    assert call["files"] == [("attachments[0]", ("receipt.pdf", b"%PDF-1.4", "application/pdf"))]


def test_expense_rejects_unknown_file_type(workspace, session):
    response = client.post(
        "/expenses",
        data={"name": "Rent", "area_of_expense": "Office", "amount": "250", "expense_date": "2024-05-01"},
        files={"attachments": ("tool.exe", b"MZ", "application/x-msdownload")},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert "attachments" in response.json()["errors"]


def test_assign_schedule_employees(workspace, session):
    session.add("PUT", "/hrms/dtr/configuration/schedules/4/employees", {"message": "Employees assigned"})

    response = client.put("/schedules/4/employees", json={"user_ids": ["7", "8"]}, headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["message"] == "Employees assigned"


def test_activity_logs_endpoint(workspace, session):
    session.add("GET", "/activity-logs", {"data": {
        "current_page": 1, "last_page": 1, "per_page": 15, "total": 1, "from": 1, "to": 1,
        "data": [{"module": "Discounts", "activity": "deleted", "created_at": "2024-05-01 10:00:00"}],
    }})

    body = client.get("/activity-logs", headers=HEADERS).json()

    assert body["data"][0]["module"] == "Discounts"
    assert body["pagination"]["per_page"] == 15


def test_currency_context(workspace):
    assert client.get("/context/currency", headers=HEADERS).json() == {"data": None}

    client.put("/context/currency", json={"id": 1, "name": "Peso", "symbol": "₱"}, headers=HEADERS)
    assert client.get("/context/currency", headers=HEADERS).json()["data"]["symbol"] == "₱"

    client.delete("/context/currency", headers=HEADERS)
    assert client.get("/context/currency", headers=HEADERS).json() == {"data": None}


def test_branch_switch_reports_change(workspace):
    first = client.put("/context/branch", json={"id": 1, "name": "Main"}, headers=HEADERS).json()
    again = client.put("/context/branch", json={"id": 1, "name": "Main"}, headers=HEADERS).json()

    assert first["changed"] is True
    assert again["changed"] is False
    assert client.get("/context/branch", headers=HEADERS).json()["data"]["id"] == 1


def test_branch_employee_transfer(workspace, session):
    session.add("POST", "/management/branches/1/users/transfer/2", {"message": "User transferred"})

    response = client.post("/branches/1/transfer/2", json={"user_id": 7}, headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["message"] == "User transferred"
    assert session.calls[0]["json"] == {"user_id": 7}


def test_token_is_not_reused_by_a_later_caller(workspace, session):
    session.add("GET", "/inventory/discounts", {"data": []})

    client.get("/discounts", headers={**HEADERS, "Authorization": "Bearer alice-secret"})
    client.get("/discounts?refresh=true", headers=HEADERS)

    calls = session.calls_to("GET", "/inventory/discounts")
    assert len(calls) == 2
    assert calls[0]["headers"]["Authorization"] == "Bearer alice-secret"
    assert "Authorization" not in calls[1]["headers"]


def test_upstream_401_does_not_affect_the_next_caller(workspace, session):
    session.add("GET", "/inventory/discounts", {"message": "Unauthenticated."}, status=401)
    session.add("GET", "/inventory/discounts", {"data": []})

    first = client.get("/discounts", headers={**HEADERS, "Authorization": "Bearer expired"})
    second = client.get("/discounts?refresh=true", headers={**HEADERS, "Authorization": "Bearer bob-token"})

    assert first.status_code == 401
    assert second.status_code == 200
    assert session.calls_to("GET", "/inventory/discounts")[1]["headers"]["Authorization"] == "Bearer bob-token"


def test_create_customer_accepts_numeric_branch_id(workspace, session):
    session.add("POST", "/customers", {"message": "Customer created", "data": customer(9)})
    session.add("GET", "/customers", {"data": [customer(9)]})

    response = client.post("/customers", json={"first_name": "Ana", "branch_id": 1}, headers=HEADERS)

    assert response.status_code == 201
    assert session.calls_to("POST", "/customers")[0]["json"]["branch_id"] == 1
