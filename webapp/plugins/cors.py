# webapp/plugins/cors.py

from flask_cors import CORS


def register(app, ctx, options):
    # CORS_ORIGINS is a comma-separated list, "*" for any origin
    raw = ctx.config.CORS_ORIGINS.strip()
    origins = "*" if raw == "*" else [o.strip() for o in raw.split(",") if o.strip()]

    CORS(app, origins=origins)
