#!/usr/bin/env python3
"""Test ping, unsupported methods and retrieval argument handling"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import uuid
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

NOT_IMPLEMENTED = {"Message": "The used HTTP-Method is not implemented."}


@pytest.fixture
def client(app):
    return TestClient(app)


def test_ping(client):
    response = client.get("/line/ping")

    assert response.status_code == 200
    assert response.json() == {"Message": "Pong."}


@pytest.mark.parametrize("path", ["/line", "/line/simple"])
@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
def test_unsupported_methods_on_render_routes(client, path, method):
    response = client.request(method, path)

    assert response.status_code == 200
    assert response.json() == NOT_IMPLEMENTED


def test_post_on_result_route_is_not_implemented(client):
    response = client.post(f"/line/result/{uuid.uuid4()}")
    assert response.json() == NOT_IMPLEMENTED


def test_retrieve_malformed_uuid(client):
    response = client.get("/line/result/definitely-not-a-uuid")

    assert response.status_code == 200
    assert response.json() == {
        "Message": "The submitted argument is not an UUID. Please send a valid UUID."
    }


def test_retrieve_unknown_uuid(client):
    response = client.get(f"/line/result/{uuid.uuid4()}")

    message = response.json()["Message"]
    assert "either not linked to any chart or already expired" in message
    assert "support@linechart.test" in message


def test_retrieve_also_answers_put(client):
    response = client.put("/line/result/nope")
    assert "not an UUID" in response.json()["Message"]


def test_unexpected_exception_becomes_message(client, service):
    with patch.object(service, "retrieve", side_effect=KeyError("boom")):
        response = client.get(f"/line/result/{uuid.uuid4()}")

    assert response.status_code == 200
    assert "errorcode 199" in response.json()["Message"]
