from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response, JSONResponse
import hashlib
from bizdesk.core.audit import audit_repo
from bizdesk.schemas.audit import AuditLogEntry, AuditStatus
import logging
from typing import Callable

logger = logging.getLogger(__name__)

TENANT_HEADER = "X-Tenant-ID"
PUBLIC_PREFIXES = ["/health", "/docs", "/redoc", "/openapi.json"]

ACTION_TYPES = {
    "GET": "READ",
    "POST": "CREATE",
    "PUT": "UPDATE",
    "PATCH": "UPDATE",
    "DELETE": "DELETE",
}


def action_type_for(method: str, endpoint: str) -> str:
    if endpoint.startswith("/health"):
        return "HEALTH_CHECK"
    if endpoint.startswith("/context"):
        return "CONTEXT"
    return ACTION_TYPES.get(method, "UNKNOWN")


def is_public(endpoint: str) -> bool:
    return endpoint == "/" or any(endpoint.startswith(p) for p in PUBLIC_PREFIXES)


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Rejects requests without a tenant header and records every request with
    SHA-256 hashes of the request and response bodies.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        endpoint = request.url.path
        method = request.method
        action_type = action_type_for(method, endpoint)

        tenant_id = request.headers.get(TENANT_HEADER)
        public = is_public(endpoint)

        logger.debug(f"Request to {endpoint}, tenant_id={tenant_id}, is_public={public}")

        if not tenant_id and not public:
            response = JSONResponse(
                status_code=400,
                content={"detail": "Missing tenant identifier"}
            )
            self._record(endpoint, method, action_type, "MISSING", None, None, 400)
            return response

        if not tenant_id:
            tenant_id = "PUBLIC"

        request_body_bytes = await request.body()
        input_hash = hashlib.sha256(request_body_bytes).hexdigest()

        # Re-inject body
        async def receive():
            return {"type": "http.request", "body": request_body_bytes}
        request._receive = receive

        status_code = 500
        output_hash = None
        try:
            response = await call_next(request)
            status_code = response.status_code

            response_body_bytes = b""
            async for chunk in response.body_iterator:
                response_body_bytes += chunk
            output_hash = hashlib.sha256(response_body_bytes).hexdigest()

            response = Response(
                content=response_body_bytes,
                status_code=response.status_code,
                headers=dict(response.headers),
                media_type=response.media_type
            )
        finally:
            self._record(endpoint, method, action_type, tenant_id, input_hash, output_hash, status_code)

        return response

    @staticmethod
    def _record(endpoint: str, method: str, action_type: str, tenant_id: str,
                input_hash, output_hash, status_code: int):
        try:
            entry = AuditLogEntry(
                endpoint=endpoint,
                method=method,
                action_type=action_type,
                tenant_id=tenant_id,
                input_hash=input_hash,
                output_hash=output_hash,
                status_code=status_code,
                status=AuditStatus.SUCCESS if 200 <= status_code < 300 else AuditStatus.FAILURE
            )
            audit_repo.save(entry)
        except Exception as e:
            logger.error(f"Audit Logging Failed: {e}")
