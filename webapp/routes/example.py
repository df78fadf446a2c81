# webapp/routes/example.py

from flask import Blueprint, jsonify


def register(app, ctx, options):
    # provided by plugins/support.py; fails registration if it isn't there
    some_support = ctx.require("some_support")

    example_bp = Blueprint("example", __name__, url_prefix="/example")

    @example_bp.route("")
    def example():
        return "this is an example"

    @example_bp.route("/support")
    def example_support():
        return jsonify({"support": some_support()})

    prefix = (options.get("prefix") or "").rstrip("/")
    app.register_blueprint(example_bp, url_prefix=f"{prefix}/example")
