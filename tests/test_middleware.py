"""Tests for request/correlation ID propagation."""

import uuid

from springmon.core.middleware import CORRELATION_HEADER, REQUEST_HEADER


def test_ids_are_echoed(client):
    resp = client.get(
        "/api/info",
        headers={REQUEST_HEADER: "req-1", CORRELATION_HEADER: "corr-1"},
    )
    assert resp.headers[REQUEST_HEADER] == "req-1"
    assert resp.headers[CORRELATION_HEADER] == "corr-1"


def test_ids_are_generated(client):
    resp = client.get("/api/info")
    uuid.UUID(resp.headers[REQUEST_HEADER])
    uuid.UUID(resp.headers[CORRELATION_HEADER])


def test_generated_ids_differ_per_request(client):
    first = client.get("/api/info").headers[REQUEST_HEADER]
    second = client.get("/api/info").headers[REQUEST_HEADER]
    assert first != second


def test_ids_on_validation_errors(client):
    resp = client.get("/api/entities/abc", headers={REQUEST_HEADER: "req-2"})
    assert resp.status_code == 422
    assert resp.headers[REQUEST_HEADER] == "req-2"
