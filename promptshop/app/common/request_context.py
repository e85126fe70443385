from __future__ import annotations

"""Per-request id: taken from the caller or minted, kept in ``g`` and sent back."""

import uuid

from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Request-ID"


def current_request_id() -> str | None:
    return getattr(g, "request_id", None)


def init_request_id(app: Flask) -> None:
    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        rid = current_request_id()
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response
