from __future__ import annotations

from flask import Blueprint

from promptshop.app import prompts
from promptshop.app.common.params import request_params
from promptshop.app.extensions import get_shop

bp = Blueprint("catalog", __name__)


@bp.get("/")
def index():
    """Product grid with the cart in the sidebar."""
    params = request_params()
    return get_shop().render("products", prompts.page_question("products", params), params)


@bp.get("/products/<product_id>")
def product_detail(product_id: str):
    params = request_params()
    return get_shop().render("product", prompts.page_question("product", params), params)
