from typing import Optional
from fastapi import Header
from bizdesk.core.http import request_token
from bizdesk.stores.workspace import Workspace, get_workspace


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    return token if scheme.lower() == "bearer" and token else authorization


async def current_workspace(
    x_tenant_id: str = Header(..., alias="X-Tenant-ID"),
    authorization: Optional[str] = Header(None),
) -> Workspace:
    """
    Resolve the caller's workspace and bind the bearer token to this request only.
    Runs on the event loop so the token is visible to the endpoint's worker thread.
    """
    request_token.set(bearer_token(authorization))
    return get_workspace(x_tenant_id)
