from flask import Flask

from promptshop.modules.catalog.routes import bp as catalog_bp
from promptshop.modules.cart.routes import bp as cart_bp
from promptshop.modules.admin.routes import bp as admin_bp


def register_blueprints(app: Flask) -> None:
    app.register_blueprint(catalog_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(admin_bp)
