# webapp/routes/health.py

from flask import Blueprint, jsonify

from webapp.context import get_context

health_bp = Blueprint("health", __name__)


@health_bp.route("/health")
def health():
    ctx = get_context()
    if ctx.mongo is not None and ctx.mongo.ping():
        return jsonify({"status": "ok", "stage": ctx.stage.value})
    return jsonify({"status": "unavailable", "stage": ctx.stage.value}), 503


def register(app, ctx, options):
    app.register_blueprint(health_bp, url_prefix=options.get("prefix"))
