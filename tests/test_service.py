"""Tests for the reconstruction service using an in-process TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from secretrecon.config import FIXED_PRIME
from secretrecon.service.app import ServiceSettings, create_app

# f(x) = x^2 + x + 1, values in mixed bases
DOC = {
    "keys": {"n": 3, "k": 3},
    "1": {"base": "10", "value": "3"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "16", "value": "D"},
}


@pytest.fixture()
def client():
    return TestClient(create_app())


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "strategy": "fixed"}


def test_reconstruct_default(client):
    resp = client.post("/reconstruct", json={"document": DOC})
    assert resp.status_code == 200
    body = resp.json()
    assert body["secret"] == "1"
    assert body["strategy"] == "fixed"
    assert body["modulus"] == str(FIXED_PRIME)
    assert body["threshold"] == 3
    assert body["indices"] == [1, 2, 3]


def test_reconstruct_rational(client):
    resp = client.post("/reconstruct", json={"document": DOC, "strategy": "rational"})
    assert resp.status_code == 200
    assert resp.json()["secret"] == "1"
    assert resp.json()["modulus"] is None


def test_reconstruct_dynamic_reports_prime(client):
    resp = client.post(
        "/reconstruct", json={"document": DOC, "strategy": "dynamic", "margin": 0}
    )
    assert resp.status_code == 200
    assert resp.json()["modulus"] == "17"
    assert resp.json()["secret"] == "1"


def test_reconstruct_custom_prime_as_string(client):
    resp = client.post("/reconstruct", json={"document": DOC, "prime": "101"})
    assert resp.status_code == 200
    assert resp.json()["modulus"] == "101"


def test_settings_change_default():
    client = TestClient(create_app(ServiceSettings(strategy="rational")))
    assert client.get("/health").json()["strategy"] == "rational"
    resp = client.post("/reconstruct", json={"document": DOC})
    assert resp.json()["strategy"] == "rational"


def test_insufficient_shares(client):
    doc = {"keys": {"k": 4}, **{k: v for k, v in DOC.items() if k != "keys"}}
    resp = client.post("/reconstruct", json={"document": doc})
    assert resp.status_code == 400
    assert "insufficient shares" in resp.json()["detail"]


def test_duplicate_index_via_rational():
    client = TestClient(create_app(ServiceSettings(strategy="rational")))
    doc = {"k": 2, "1": {"base": "10", "value": "3"}, "01": {"base": "10", "value": "4"}}
    resp = client.post("/reconstruct", json={"document": doc})
    assert resp.status_code == 400
    assert "division by zero" in resp.json()["detail"]


def test_malformed_document(client):
    resp = client.post("/reconstruct", json={"document": {"1": {"base": "10", "value": "3"}}})
    assert resp.status_code == 422
    assert "Missing k" in resp.json()["detail"]


def test_unknown_strategy(client):
    resp = client.post("/reconstruct", json={"document": DOC, "strategy": "nope"})
    assert resp.status_code == 422


def test_secret_longer_than_default_int_string_limit(client):
    digits = "9" * 5000
    doc = {"k": 1, "1": {"base": "10", "value": digits}}
    resp = client.post("/reconstruct", json={"document": doc, "strategy": "rational"})
    assert resp.status_code == 200
    assert resp.json()["secret"] == digits


def test_hex_secret_printed_in_decimal(client):
    doc = {"k": 1, "1": {"base": "16", "value": "f" * 4000}}
    resp = client.post("/reconstruct", json={"document": doc, "strategy": "rational"})
    assert resp.status_code == 200
    assert resp.json()["secret"] == str(16**4000 - 1)


def test_composite_prime_rejected(client):
    resp = client.post("/reconstruct", json={"document": DOC, "prime": "100"})
    assert resp.status_code == 422
    assert "not prime" in resp.json()["detail"]
