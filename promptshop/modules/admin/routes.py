from __future__ import annotations

from flask import Blueprint, redirect, request, url_for

from promptshop.app import prompts
from promptshop.app.common.errors import abort_json
from promptshop.app.common.params import request_params
from promptshop.app.extensions import get_shop

bp = Blueprint("admin", __name__, url_prefix="/admin")


def _page(name: str):
    params = request_params()
    return get_shop().render(name, prompts.page_question(name, params), params)


@bp.get("/products")
def list_products():
    return _page("admin_products")


@bp.get("/products/new")
def new_product():
    return _page("admin_products_new")


@bp.post("/products")
def create_product():
    get_shop().command(prompts.create_product(request_params()))
    return redirect(url_for("admin.list_products"))


@bp.get("/products/<product_id>/edit")
def edit_product(product_id: str):
    return _page("admin_products_edit")


@bp.put("/products/<product_id>")
def update_product(product_id: str):
    get_shop().command(prompts.update_product(product_id, request_params()))
    return redirect(url_for("admin.list_products"))


@bp.post("/products/<product_id>")
def update_product_form(product_id: str):
    """HTML forms can only POST; the edit form sends ``_method=PUT``."""
    method = (request.form.get("_method") or "").upper()
    if method != "PUT":
        abort_json(
            405,
            "method_not_allowed",
            "Use _method=PUT to update a product",
            {"_method": method or None, "allowed": ["PUT"]},
            headers={"Allow": "PUT"},
        )
    return update_product(product_id)


@bp.get("/products/<product_id>/delete")
def delete_product(product_id: str):
    get_shop().command(prompts.delete_product(product_id))
    return redirect(url_for("admin.list_products"))
