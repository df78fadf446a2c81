# webapp/routes/pages.py

from flask import Blueprint, request

from webapp.context import get_context

pages_bp = Blueprint("pages", __name__, url_prefix="/pages")


@pages_bp.route("/<name>")
def render_page(name: str):
    """
    Render views/<name>.html with the query string as template data.
    An unknown name ends up as a 404 (see ViewRenderer.init_app).
    """
    ctx = get_context()
    html = ctx.render(f"{name}.html", request.args.to_dict())
    return html, 200, {"Content-Type": "text/html; charset=utf-8"}


def register(app, ctx, options):
    prefix = (options.get("prefix") or "").rstrip("/")
    app.register_blueprint(pages_bp, url_prefix=f"{prefix}/pages")
