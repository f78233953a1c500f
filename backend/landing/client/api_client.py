"""
HTTP client for the landing admin API.

``LandingAdminClient`` satisfies the ``SectionStore`` contract so the reorder
coordinator and editor tooling can run against a remote backend:

    with LandingAdminClient("https://api.example.com", token, tenant_id) as client:
        view = SectionView(tenant_id, client.list(tenant_id))
        ReorderCoordinator(client).reorder(view, new_ids)
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from landing.application.sections.records import SectionRecord
from landing.catalog import Catalog
from landing.domain.exceptions import (
    InvalidPermutation,
    InvalidVariant,
    LandingError,
    NotFound,
    TransportError,
    UnregisteredSection,
    ValidationRejected,
)

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 5
READ_TIMEOUT = 10

Timeout = Union[int, float, Tuple[float, float], None]


def _error_from_response(response: requests.Response) -> LandingError:
    """Map an error response onto the domain exception named by its ``error`` field."""
    try:
        payload = response.json() or {}
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    kind = payload.get("error")
    message = payload.get("message") or payload.get("error") or response.reason or ""

    if kind == "NotFound" or (kind is None and response.status_code == 404):
        return NotFound(message)
    if kind == "InvalidPermutation":
        return InvalidPermutation(
            missing=payload.get("missing") or (),
            unexpected=payload.get("unexpected") or (),
            duplicates=payload.get("duplicates") or (),
        )
    if kind == "ValidationRejected":
        return ValidationRejected(payload.get("key", ""), payload.get("reason", message))
    if kind == "UnregisteredSection":
        return UnregisteredSection(payload.get("section_key", ""))
    if kind == "InvalidVariant":
        return InvalidVariant(payload.get("section_key", ""), payload.get("variant"), payload.get("fallback"))

    error = LandingError(message)
    error.status_code = response.status_code
    return error


class LandingAdminClient:
    """Section store backed by the ``/api/v1/landing`` admin routes."""

    def __init__(
        self,
        base_url: str,
        token: str,
        tenant_id: str,
        timeout: Timeout = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.tenant_id = tenant_id
        self.timeout = self._get_timeout(timeout)
        self._closed = False
        self.session = session or self._create_session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "X-Tenant-ID": tenant_id,
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        logger.debug("LandingAdminClient initialized: base_url=%s tenant=%s", self.base_url, tenant_id)

    @classmethod
    def from_config(cls, config, base_url: str, token: str, tenant_id: str, **kwargs) -> "LandingAdminClient":
        """Build a client using ``LANDING_CLIENT_TIMEOUT`` from a Flask-style config mapping."""
        return cls(base_url, token, tenant_id, timeout=config.get("LANDING_CLIENT_TIMEOUT", READ_TIMEOUT), **kwargs)

    @staticmethod
    def _create_session() -> requests.Session:
        session = requests.Session()

        # One connection-level retry for reads only. Writes are never replayed
        # here; ReorderCoordinator owns the retry for reorder.
        retry_strategy = Retry(
            total=1,
            connect=1,
            read=0,
            status=0,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    @staticmethod
    def _get_timeout(timeout: Timeout) -> Tuple[float, float]:
        if timeout is None:
            return (CONNECT_TIMEOUT, READ_TIMEOUT)
        if isinstance(timeout, tuple):
            return timeout
        return (CONNECT_TIMEOUT, timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        if self._closed:
            return
        self._closed = True
        self.session.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _check_tenant(self, tenant_id: str) -> None:
        if tenant_id != self.tenant_id:
            raise NotFound(f"Client is bound to tenant '{self.tenant_id}', not '{tenant_id}'")

    def _request(self, method: str, path: str, json: Any = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            logger.error("Landing API timeout: %s %s - %s", method, url, exc)
            raise TransportError(f"Request timed out: {method} {path}", original_error=exc)
        except requests.exceptions.RequestException as exc:
            logger.error("Landing API connection failed: %s %s - %s", method, url, exc)
            raise TransportError(f"Could not reach landing API: {method} {path}", original_error=exc)

        if response.status_code >= 500:
            logger.error("Landing API error %s: %s %s", response.status_code, method, url)
            raise TransportError(
                f"Landing API returned {response.status_code} for {method} {path}",
                status_code=response.status_code,
            )
        if response.status_code >= 400:
            logger.warning("Landing API rejected %s %s with %s", method, url, response.status_code)
            raise _error_from_response(response)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(f"Malformed response for {method} {path}", original_error=exc)

    # ------------------------------------------------------------------
    # SectionStore
    # ------------------------------------------------------------------

    def fetch_catalog(self) -> Catalog:
        data = self._request("GET", "/api/v1/landing/library")
        return Catalog.from_rows(data.get("items") or [])

    def list(self, tenant_id: str) -> List[SectionRecord]:
        self._check_tenant(tenant_id)
        data = self._request("GET", "/api/v1/landing/sections")
        return [self._record(item) for item in data.get("items") or []]

    def create(self, tenant_id, section_key, variant=None, config_data=None) -> SectionRecord:
        self._check_tenant(tenant_id)
        body: Dict[str, Any] = {"section_key": section_key}
        if variant is not None:
            body["variant"] = variant
        if config_data is not None:
            body["config_data"] = config_data
        return self._record(self._request("POST", "/api/v1/landing/sections", json=body))

    def update(self, tenant_id, section_id, patch) -> SectionRecord:
        self._check_tenant(tenant_id)
        return self._record(self._request("PUT", f"/api/v1/landing/sections/{section_id}", json=dict(patch)))

    def delete(self, tenant_id, section_id) -> None:
        self._check_tenant(tenant_id)
        self._request("DELETE", f"/api/v1/landing/sections/{section_id}")

    def toggle(self, tenant_id, section_id) -> SectionRecord:
        self._check_tenant(tenant_id)
        return self._record(self._request("POST", f"/api/v1/landing/sections/{section_id}/toggle"))

    def reorder(self, tenant_id: str, ordered_ids: Sequence[str]) -> None:
        self._check_tenant(tenant_id)
        self._request("PUT", "/api/v1/landing/sections/reorder", json={"ids": list(ordered_ids)})

    def _record(self, raw: Dict[str, Any]) -> SectionRecord:
        return SectionRecord.from_dict({"tenant_id": self.tenant_id, **raw})
