"""Tests for the upstream relay routes (/api/verify and /api/investigate)."""

import json

import pytest

from kord.llm import HOSTILE_AUDITOR_PROMPT, INVESTIGATOR_PROMPT

ROUTES = ["/api/verify", "/api/investigate"]


@pytest.mark.parametrize("route", ROUTES)
def test_returns_401_when_api_key_missing(client, settings, upstream, route):
    settings.openrouter_api_key = None
    res = client.post(route, json={"prompt": "DOCUMENT TO ANALYZE:\nSome brief"})
    assert res.status_code == 401
    assert res.json() == {"error": "API Key is not configured"}
    assert upstream.requests == []


@pytest.mark.parametrize("route", ROUTES)
def test_blank_api_key_counts_as_missing(client, settings, route):
    settings.openrouter_api_key = "   \n"
    res = client.post(route, json={"prompt": "x"})
    assert res.status_code == 401


@pytest.mark.parametrize("route", ROUTES)
def test_success_relays_upstream_body(client, upstream, route):
    res = client.post(route, json={"prompt": "DOCUMENT TO ANALYZE:\nSome brief"})
    assert res.status_code == 200
    assert res.json() == upstream.body


@pytest.mark.parametrize("status_code", [400, 402, 429, 503])
@pytest.mark.parametrize("route", ROUTES)
def test_upstream_error_relayed_unchanged(client, upstream, route, status_code):
    upstream.status_code = status_code
    upstream.body = {"error": {"message": "Rate limit exceeded: free-models-per-day", "code": status_code}}
    res = client.post(route, json={"prompt": "hello"})
    assert res.status_code == status_code
    assert res.json() == upstream.body


@pytest.mark.parametrize("route", ROUTES)
def test_non_json_upstream_body_becomes_500(client, upstream, route):
    upstream.status_code = 502
    upstream.raw = b"<html>Bad Gateway</html>"
    res = client.post(route, json={"prompt": "hello"})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


def test_verify_sends_hostile_auditor_prompt(client, settings, upstream):
    res = client.post("/api/verify", json={"prompt": "my brief", "requestId": "req-42"})
    assert res.status_code == 200

    request = upstream.requests[0]
    assert str(request.url) == "https://openrouter.test/api/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-or-test"
    assert request.headers["X-Title"] == "Kord Legal"
    assert request.headers["HTTP-Referer"] == "http://localhost:3000"

    payload = json.loads(request.content)
    assert payload["model"] == settings.kord_model
    assert payload["messages"] == [
        {"role": "system", "content": HOSTILE_AUDITOR_PROMPT},
        {"role": "user", "content": "my brief"},
    ]


def test_investigate_sends_investigator_prompt(client, upstream):
    client.post("/api/investigate", json={"prompt": "my brief"})
    payload = json.loads(upstream.requests[0].content)
    assert payload["messages"][0] == {"role": "system", "content": INVESTIGATOR_PROMPT}
    assert INVESTIGATOR_PROMPT != HOSTILE_AUDITOR_PROMPT


def test_api_key_whitespace_trimmed(client, settings, upstream):
    settings.openrouter_api_key = "  sk-or-padded \n"
    client.post("/api/verify", json={"prompt": "x"})
    assert upstream.requests[0].headers["Authorization"] == "Bearer sk-or-padded"


@pytest.mark.parametrize("route", ROUTES)
@pytest.mark.parametrize("body", [{}, {"prompt": 123}, {"requestId": "abc"}, ["prompt"], None])
def test_body_without_string_prompt_is_internal_error(client, upstream, route, body):
    res = client.post(route, json=body)
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert upstream.requests == []


@pytest.mark.parametrize("route", ROUTES)
def test_invalid_json_body_is_internal_error(client, upstream, route):
    res = client.post(route, content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert upstream.requests == []
