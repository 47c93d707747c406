"""
Pytest configuration for Payload Guard tests.

Sets up test environment and global fixtures.
"""
import copy
import json
import os

import pytest
from starlette.requests import Request

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


VALID_USER = {
    "name": "Alice",
    "email": "alice@example.com",
    "age": 15,
    "address": {"city": "New York", "zip": 12345},
}


@pytest.fixture
def valid_user_payload():
    """A user payload that passes every check (fresh copy per test)."""
    return copy.deepcopy(VALID_USER)


@pytest.fixture
def valid_user_body(valid_user_payload):
    """The valid user payload encoded as a JSON request body."""
    return json.dumps(valid_user_payload).encode()


def build_request(body: bytes, chunk_size: int | None = None, disconnect: bool = False) -> Request:
    """
    Build a Starlette request whose body is delivered through ASGI receive().

    Once the messages run out receive() reports a disconnect, so a second
    read of the stream fails instead of returning the body again.
    """
    if chunk_size:
        chunks = [body[i:i + chunk_size] for i in range(0, len(body), chunk_size)] or [b""]
    else:
        chunks = [body]

    messages = []
    if disconnect:
        messages.append({"type": "http.disconnect"})
    else:
        for index, chunk in enumerate(chunks):
            messages.append({
                "type": "http.request",
                "body": chunk,
                "more_body": index < len(chunks) - 1,
            })

    async def receive():
        if messages:
            return messages.pop(0)
        return {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/validate",
        "raw_path": b"/validate",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json")],
        "http_version": "1.1",
        "scheme": "http",
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
        "root_path": "",
    }
    return Request(scope, receive)


@pytest.fixture
def make_request():
    """Factory fixture returning build_request."""
    return build_request
