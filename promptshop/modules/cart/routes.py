from __future__ import annotations

from flask import Blueprint, redirect, url_for

from promptshop.app import prompts
from promptshop.app.common.params import request_params
from promptshop.app.extensions import get_shop

bp = Blueprint("cart", __name__)


@bp.get("/cart")
def show_cart():
    params = request_params()
    return get_shop().render("cart", prompts.page_question("cart", params), params)


@bp.get("/cart/add/<product_id>")
def add_to_cart(product_id: str):
    get_shop().command(prompts.add_to_cart(product_id))
    return redirect(url_for("catalog.index"))


@bp.get("/cart/remove/<product_id>")
def remove_from_cart(product_id: str):
    get_shop().command(prompts.remove_from_cart(product_id))
    return redirect(url_for("cart.show_cart"))
