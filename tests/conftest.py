"""Pytest hooks and fixtures."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from odoosearch.config.access import clear_config_cache, set_active_config_path
from odoosearch.config.schema import Config, OdooConfig


def _evaluate(record: dict[str, Any], domain: list[Any]) -> bool:
    """Tiny evaluator for the prefix-notation domains the client sends."""

    def parse(i: int) -> tuple[bool, int]:
        token = domain[i]
        if token in ("|", "&"):
            left, i = parse(i + 1)
            right, i = parse(i)
            return (left or right) if token == "|" else (left and right), i
        field, op, value = token
        assert op == "ilike", f"unsupported operator {op}"
        return str(value).lower() in str(record.get(field) or "").lower(), i + 1

    result, i = True, 0
    while i < len(domain):
        matched, i = parse(i)
        result = result and matched
    return result


class FakeOdoo:
    """In-memory stand-in for the /jsonrpc endpoint, mounted through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.login_response: dict[str, Any] = {"result": 7}
        self.records: dict[str, list[dict[str, Any]]] = {}
        self.errors: dict[str, dict[str, Any]] = {}
        self.status_code = 200
        self.raise_exc: Exception | None = None

    @property
    def login_calls(self) -> list[dict[str, Any]]:
        return [r for r in self.requests if r["params"]["service"] == "common"]

    @property
    def execute_calls(self) -> list[dict[str, Any]]:
        return [r for r in self.requests if r["params"]["service"] == "object"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="Internal Server Error")
        params = body["params"]
        if params["service"] == "common":
            payload = dict(self.login_response)
        else:
            _db, _uid, _secret, model, method, args, kwargs = params["args"]
            payload = self._execute(model, method, args, kwargs)
        payload["jsonrpc"] = "2.0"
        payload["id"] = body["id"]
        return httpx.Response(200, json=payload)

    def _execute(self, model: str, method: str, args: list[Any], kwargs: dict[str, Any]) -> dict[str, Any]:
        if model in self.errors:
            return {"error": self.errors[model]}
        assert method == "search_read"
        domain = args[0] if args else []
        matched = [r for r in self.records.get(model, []) if _evaluate(r, domain)]
        limit = kwargs.get("limit")
        if limit:
            matched = matched[:limit]
        fields = kwargs.get("fields") or []
        if fields:
            matched = [{k: v for k, v in r.items() if k in fields} for r in matched]
        return {"result": matched}


@pytest.fixture
def fake_odoo() -> FakeOdoo:
    backend = FakeOdoo()
    backend.records["project.project"] = [
        {"id": 12, "name": "Website Revamp", "display_name": "Website Revamp", "task_count": 4},
        {"id": 13, "name": "Mobile App", "display_name": "Mobile App", "task_count": 0},
    ]
    return backend


@pytest.fixture
def http_client(fake_odoo: FakeOdoo) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_odoo.handler))


@pytest.fixture
def odoo_config() -> Config:
    return Config(
        odoo=OdooConfig(
            url="https://example.odoo.com/",
            database="acme",
            user_login="api",
            api_key="k",
        )
    )


@pytest.fixture(autouse=True)
def _reset_config_cache():
    set_active_config_path(None)
    clear_config_cache()
    yield
    set_active_config_path(None)
    clear_config_cache()
