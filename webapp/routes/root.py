# webapp/routes/root.py

from flask import Blueprint, jsonify

root_bp = Blueprint("root", __name__)


@root_bp.route("/")
def index():
    return jsonify({"root": True})


def register(app, ctx, options):
    app.register_blueprint(root_bp, url_prefix=options.get("prefix"))
