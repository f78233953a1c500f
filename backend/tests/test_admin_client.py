"""Tests for the HTTP section store, with the requests session mocked."""
from unittest.mock import MagicMock

import pytest
import requests

from landing.application.reorder import ReorderCoordinator, SectionView
from landing.catalog import default_catalog
from landing.client import LandingAdminClient
from landing.domain.exceptions import (
    InvalidPermutation,
    NotFound,
    ReorderFailed,
    TransportError,
    UnregisteredSection,
    ValidationRejected,
)


def response(status=200, payload=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.reason = "reason"
    resp.content = b"{}" if payload is not None else b""
    resp.json.return_value = payload
    return resp


def section_json(section_id, order_index, section_key="hero"):
    return {
        "id": section_id,
        "section_key": section_key,
        "variant": "standard",
        "order_index": order_index,
        "is_active": True,
        "config_data": {},
    }


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return LandingAdminClient("https://api.example.com/", "token-123", "t1", timeout=3, session=session)


class TestRequests:
    def test_headers_and_timeout(self, client, session):
        session.request.return_value = response(payload={"items": []})
        client.list("t1")

        assert session.headers["Authorization"] == "Bearer token-123"
        assert session.headers["X-Tenant-ID"] == "t1"
        method, url = session.request.call_args.args
        assert (method, url) == ("GET", "https://api.example.com/api/v1/landing/sections")
        assert session.request.call_args.kwargs["timeout"] == (5, 3)

    def test_list_maps_records(self, client, session):
        session.request.return_value = response(payload={"items": [section_json("a", 1), section_json("b", 2)]})
        records = client.list("t1")
        assert [r.id for r in records] == ["a", "b"]
        assert records[0].tenant_id == "t1"

    def test_fetch_catalog(self, client, session):
        session.request.return_value = response(payload={"items": default_catalog().to_list()})
        catalog = client.fetch_catalog()
        assert catalog.get("menu").defaults_for("premium")["max_items"] == 6

    def test_create_body(self, client, session):
        session.request.return_value = response(201, section_json("a", 1))
        client.create("t1", "hero", variant="premium")
        assert session.request.call_args.kwargs["json"] == {"section_key": "hero", "variant": "premium"}

    def test_reorder_body(self, client, session):
        session.request.return_value = response(payload={"message": "ok", "items": []})
        client.reorder("t1", ("b", "a"))
        method, url = session.request.call_args.args
        assert method == "PUT" and url.endswith("/api/v1/landing/sections/reorder")
        assert session.request.call_args.kwargs["json"] == {"ids": ["b", "a"]}

    def test_empty_body(self, client, session):
        session.request.return_value = response(200)
        assert client.delete("t1", "a") is None

    def test_other_tenant_refused_locally(self, client, session):
        with pytest.raises(NotFound):
            client.list("t2")
        session.request.assert_not_called()

    def test_timeout_from_config(self, session):
        client = LandingAdminClient.from_config(
            {"LANDING_CLIENT_TIMEOUT": 7.5}, "https://api.example.com", "t", "t1", session=session,
        )
        assert client.timeout == (5, 7.5)

    def test_context_manager_closes(self, session):
        with LandingAdminClient("https://api.example.com", "t", "t1", session=session):
            pass
        session.close.assert_called_once()


class TestErrors:
    def test_timeout_is_transport_error(self, client, session):
        session.request.side_effect = requests.exceptions.ReadTimeout("slow")
        with pytest.raises(TransportError) as exc:
            client.list("t1")
        assert isinstance(exc.value.original_error, requests.exceptions.ReadTimeout)

    def test_connection_error_is_transport_error(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError):
            client.toggle("t1", "a")

    def test_server_error_is_transport_error(self, client, session):
        session.request.return_value = response(503, {"error": "down"})
        with pytest.raises(TransportError) as exc:
            client.list("t1")
        assert exc.value.remote_status == 503

    @pytest.mark.parametrize("status, payload, expected", [
        (404, {"error": "NotFound", "message": "Section a not found"}, NotFound),
        (400, {"error": "InvalidPermutation", "missing": ["b"]}, InvalidPermutation),
        (422, {"error": "ValidationRejected", "key": "height", "reason": "bad"}, ValidationRejected),
        (400, {"error": "UnregisteredSection", "section_key": "promo"}, UnregisteredSection),
    ])
    def test_client_errors_map_to_domain(self, client, session, status, payload, expected):
        session.request.return_value = response(status, payload)
        with pytest.raises(expected):
            client.update("t1", "a", {"config_data": {}})

    def test_permutation_details_kept(self, client, session):
        session.request.return_value = response(400, {"error": "InvalidPermutation", "missing": ["b"]})
        with pytest.raises(InvalidPermutation) as exc:
            client.reorder("t1", ["a"])
        assert exc.value.missing == ["b"]


class TestWithCoordinator:
    def test_reorder_retried_once_then_rolled_back(self, client, session):
        listed = response(payload={"items": [section_json("a", 1), section_json("b", 2)]})
        session.request.side_effect = [
            listed,
            requests.exceptions.ReadTimeout("slow"),
            requests.exceptions.ReadTimeout("slow"),
            listed,
        ]
        view = SectionView("t1", client.list("t1"))

        with pytest.raises(ReorderFailed) as exc:
            ReorderCoordinator(client).reorder(view, ["b", "a"])

        assert exc.value.refetched is True
        assert view.ids == ["a", "b"]
        methods = [call.args[0] for call in session.request.call_args_list]
        assert methods == ["GET", "PUT", "PUT", "GET"]
