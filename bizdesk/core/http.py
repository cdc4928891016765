from contextvars import ContextVar
from typing import Any, Dict, Optional
import json
import logging
import requests
from bizdesk.core.config import settings
from bizdesk.core.errors import ApiError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Bearer token of the request being served. Set per request, never stored on a workspace.
request_token: ContextVar[Optional[str]] = ContextVar("request_token", default=None)


def _parse_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class ApiClient:
    """
    Single entry point to the upstream REST backend.
    Adds the request's bearer token and tenant/branch headers from the workspace context, parses JSON,
    and turns non-2xx answers into ApiError carrying the parsed body.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None, context=None):
        self.base_url = (base_url or settings.UPSTREAM_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.context = context

    def _headers(self, multipart: bool) -> Dict[str, str]:
        headers: Dict[str, str] = {} if multipart else dict(DEFAULT_HEADERS)
        if multipart:
            headers["Accept"] = "application/json"
        token = request_token.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if self.context is not None:
            tenant = self.context.get_tenant()
            if tenant:
                headers["X-Tenant-ID"] = str(tenant.id)
            branch = self.context.get_branch()
            if branch:
                headers["X-Branch-ID"] = str(branch.id)
        return headers

    def request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                json_body: Any = None, data: Any = None, files: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        multipart = files is not None or data is not None
        logger.debug(f"API call: {method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body if not multipart else None,
                data=data,
                files=files,
                headers=self._headers(multipart),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"API transport failure for {method} {url}: {e}")
            raise ApiError(0, {"message": f"Upstream unavailable: {e}"})

        if not 200 <= response.status_code < 300:
            if response.status_code == 401:
                logger.warning(f"API: 401 Unauthorized for {method} {url}")
            text = response.text
            body = _parse_body(text)
            if isinstance(body, str):
                body = {"message": body}
            logger.warning(f"API error {response.status_code} for {method} {url}")
            raise ApiError(response.status_code, body)

        return _parse_body(response.text)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json_body: Any = None, data: Any = None, files: Any = None) -> Any:
        return self.request("POST", path, json_body=json_body, data=data, files=files)

    def put(self, path: str, json_body: Any = None) -> Any:
        return self.request("PUT", path, json_body=json_body)

    def patch(self, path: str, json_body: Any = None) -> Any:
        return self.request("PATCH", path, json_body=json_body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
