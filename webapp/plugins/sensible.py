# webapp/plugins/sensible.py
#
# JSON error boundary: request-time errors become JSON responses
# and never take the process down.

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException, InternalServerError

logger = logging.getLogger(__name__)


def error_payload(status: int, error: str, message: str):
    return jsonify({"statusCode": status, "error": error, "message": message}), status


def handle_http_error(exc: HTTPException):
    return error_payload(exc.code or 500, exc.name, exc.description or exc.name)


def handle_unexpected_error(exc: Exception):
    logger.exception("Unhandled error while serving request")
    return error_payload(500, InternalServerError().name, "An internal server error occurred")


def register(app, ctx, options):
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
