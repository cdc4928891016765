import hashlib
from fastapi.testclient import TestClient
from bizdesk.main import app
from bizdesk.core.audit import audit_repo
from bizdesk.core.middleware import action_type_for
from bizdesk.schemas.audit import AuditStatus

client = TestClient(app)


def test_health_request_is_logged():
    audit_repo.clear()

    response = client.get("/health")
    assert response.status_code == 200

    log = next(l for l in audit_repo.get_all() if l.endpoint == "/health")
    assert log.action_type == "HEALTH_CHECK"
    assert log.tenant_id == "PUBLIC"
    assert log.status == AuditStatus.SUCCESS
    # empty bodies still hash deterministically
    assert log.input_hash == hashlib.sha256(b"").hexdigest()
    assert log.output_hash == hashlib.sha256(response.content).hexdigest()


def test_failed_request_is_logged_as_failure(workspace):
    audit_repo.clear()

    client.get("/customers", headers={"X-Tenant-ID": "tenant-1"})

    log = audit_repo.get_all("tenant-1")[-1]
    assert log.action_type == "READ"
    assert log.status_code == 400
    assert log.status == AuditStatus.FAILURE


def test_action_types():
    assert action_type_for("POST", "/customers") == "CREATE"
    assert action_type_for("PUT", "/loans/1") == "UPDATE"
    assert action_type_for("DELETE", "/loans/1") == "DELETE"
    assert action_type_for("PUT", "/context/branch") == "CONTEXT"
    assert action_type_for("OPTIONS", "/customers") == "UNKNOWN"
