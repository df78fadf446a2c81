# webapp/static.py

import logging

from flask import Flask, send_from_directory

logger = logging.getLogger(__name__)


def mount_static(app: Flask, root: str, prefix: str = "/", endpoint: str = "public") -> None:
    """
    Serve files under `root` as-is at `prefix`.

    Missing files (and anything resolving outside root) are a plain 404.
    The rule is a catch-all <path:...>, so Werkzeug always prefers a
    concrete route with the same path, whichever was added first.
    """
    base = "/" + prefix.strip("/")
    rule = base.rstrip("/") + "/<path:filename>"

    def serve_public(filename: str):
        return send_from_directory(root, filename)

    app.add_url_rule(rule, endpoint=endpoint, view_func=serve_public, methods=["GET", "HEAD"])
    logger.info("Serving %s at %s", root, base)
