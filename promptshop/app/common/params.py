from __future__ import annotations

from typing import Any, Dict

from flask import request


def request_params() -> Dict[str, Any]:
    """Query string, form fields and route arguments merged into one dict.

    Route arguments win over form fields, form fields over the query string.
    """
    params: Dict[str, Any] = {}
    params.update(request.args.to_dict())
    params.update(request.form.to_dict())
    params.update(request.view_args or {})
    return params
