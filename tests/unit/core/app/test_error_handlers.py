from __future__ import annotations

import asyncio
import json
from typing import Any

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from ajax_commands.core.app.error_handlers import (
    ajax_exception_handler,
    general_exception_handler,
    http_exception_handler,
)
from ajax_commands.core.common.exceptions import (
    AjaxCommandsError,
    CallbackNotFoundError,
    ConfigurationError,
)


def make_request(path: str) -> Request:
    async def receive() -> dict[str, Any]:
        return {"type": "http.request"}

    scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": [],
        "client": ("127.0.0.1", 12345),
        "server": ("testserver", 80),
    }
    return Request(scope, receive=receive)


def parse_json_response(response: Response) -> dict[str, Any]:
    return json.loads(response.body.decode("utf-8"))


def call_handler(func, *args, **kwargs) -> Response:
    return asyncio.run(func(*args, **kwargs))


def test_ajax_exception_handler_uses_exception_status() -> None:
    exc = CallbackNotFoundError("Ajax callback 'x' is not registered", callback_name="x")

    response = call_handler(ajax_exception_handler, make_request("/ajax/x"), exc)

    assert response.status_code == 404
    assert parse_json_response(response) == {
        "error": {
            "message": "Ajax callback 'x' is not registered",
            "type": "CallbackNotFoundError",
        }
    }


def test_ajax_exception_handler_includes_details() -> None:
    exc = ConfigurationError("bad config", details={"path": "x.toml"})

    response = call_handler(ajax_exception_handler, make_request("/ajax/x"), exc)

    assert response.status_code == 400
    assert parse_json_response(response)["error"]["details"] == {"path": "x.toml"}


def test_base_error_defaults_to_500() -> None:
    exc = AjaxCommandsError("oops")
    assert exc.status_code == 500
    assert exc.to_dict() == {"error": {"message": "oops", "type": "AjaxCommandsError"}}


def test_http_exception_handler_formats_detail() -> None:
    exc = HTTPException(status_code=405, detail="Method Not Allowed")

    response = call_handler(http_exception_handler, make_request("/ajax/x"), exc)

    assert response.status_code == 405
    assert parse_json_response(response) == {
        "error": {"message": "Method Not Allowed", "type": "HttpError"}
    }


def test_general_exception_handler_hides_details() -> None:
    response = call_handler(
        general_exception_handler, make_request("/ajax/x"), RuntimeError("secret")
    )

    assert response.status_code == 500
    assert "secret" not in response.body.decode("utf-8")
