"""Tests for the HTTP service using in-process ASGI clients."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from secretsolver.config import MAX_DIGITS
from secretsolver.demo.run_demo import SAMPLE_SMALL
from secretsolver.service.app import app


@pytest.fixture()
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_solve(client):
    resp = client.post("/solve", json=SAMPLE_SMALL)
    assert resp.status_code == 200
    body = resp.json()
    assert body["secret"] == "3"
    assert body["exact"] is True
    assert body["k"] == 3
    assert [p["x"] for p in body["points"]] == ["1", "2", "3"]
    assert "trace" not in body
    assert "warning" not in body


def test_solve_with_trace(client):
    resp = client.post("/solve", params={"trace": "true"}, json=SAMPLE_SMALL)
    assert resp.status_code == 200
    events = [e["event"] for e in resp.json()["trace"]]
    assert events[0] == "parameters"
    assert events[-1] == "result"


def test_solve_invalid_digit(client):
    doc = {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "g"}}
    resp = client.post("/solve", json=doc)
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "invalid_digit"


def test_solve_insufficient(client):
    resp = client.post("/solve", json={"keys": {"n": 3, "k": 3}})
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "insufficient_shares"


def test_solve_malformed_body(client):
    resp = client.post("/solve", content=b"{oops")
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "malformed_input"


def test_solve_duplicate_keys_conflict(client):
    text = (
        '{"keys": {"n": 2, "k": 2},'
        ' "2": {"base": "10", "value": "7"},'
        ' "2": {"base": "10", "value": "9"}}'
    )
    resp = client.post("/solve", content=text, headers={"content-type": "application/json"})
    assert resp.status_code == 409
    assert resp.json()["detail"]["error"] == "inconsistent_shares"


def test_solve_non_integer_has_warning(client):
    doc = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "1"},
        "3": {"base": "10", "value": "2"},
    }
    resp = client.post("/solve", json=doc)
    assert resp.status_code == 200
    body = resp.json()
    assert body["exact"] is False
    assert "1/2" in body["warning"]


def test_solve_batch(client):
    bad = {"keys": {"n": 1, "k": 1}, "1": {"base": "2", "value": "2"}}
    resp = client.post("/solve_batch", json={"problems": [SAMPLE_SMALL, bad]})
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert results[0]["ok"] is True
    assert results[0]["secret"] == "3"
    assert results[1] == {
        "index": 1,
        "ok": False,
        "error": "invalid_digit",
        "detail": "Invalid digit '2' at position 0 for base 2",
    }


@pytest.mark.asyncio
async def test_solve_async_transport():
    from httpx import ASGITransport, AsyncClient

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://solver") as ac:
        resp = await ac.post("/solve", content=json.dumps(SAMPLE_SMALL))
    assert resp.status_code == 200
    assert resp.json()["secret"] == "3"


def test_solve_undecodable_body(client):
    resp = client.post("/solve", content=b'{"keys": \xff}')
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "malformed_input"


def test_solve_value_wider_than_decimal_text_limit(client):
    doc = {"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "f" * MAX_DIGITS}}
    resp = client.post("/solve", params={"trace": "true"}, json=doc)
    assert resp.status_code == 200
    body = resp.json()
    assert body["secret"] == "0x" + "f" * MAX_DIGITS
    assert body["trace"][-1]["data"]["secret"] == body["secret"]


def test_solve_batch_isolates_oversized_share_id(client):
    wide = {"keys": {"n": 1, "k": 1}, "1" * 4000: {"base": "10", "value": "4"}}
    resp = client.post("/solve_batch", json={"problems": [wide, SAMPLE_SMALL]})
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert [r["ok"] for r in results] == [False, True]
    assert results[0]["error"] == "malformed_input"
