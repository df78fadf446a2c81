# webapp/__init__.py

import logging
import os
from typing import Any, Callable, Iterable, Mapping, Optional

from flask import Flask

from .config import Config, load_config
from .context import EXTENSION_KEY, AppContext, Stage
from .db import MongoConnector
from .registry import Registration, register_all
from .static import mount_static
from .renderer import ViewRenderer

logger = logging.getLogger(__name__)

HERE = os.path.dirname(os.path.abspath(__file__))
VIEWS_DIR = os.path.join(HERE, "views")
PUBLIC_DIR = os.path.join(HERE, "public")


def _advance(ctx: AppContext, stage: Stage) -> None:
    ctx.stage = stage
    logger.info("Startup stage: %s", stage.value)


def create_app(
    options: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, Any]] = None,
    client_factory: Optional[Callable[..., Any]] = None,
    plugins: Optional[Iterable[Registration]] = None,
    routes: Optional[Iterable[Registration]] = None,
) -> Flask:
    """
    Build the app, one step at a time, in this order:

    config -> plugins -> routes -> database -> views -> static files

    Any StartupError raised along the way propagates to the caller;
    nothing is served from a half-built app.

    - env: used instead of os.environ + .env when given (tests)
    - client_factory: MongoClient replacement (tests use mongomock)
    - plugins / routes: registration lists, default to the packaged ones
    """
    options = dict(options or {})

    # 1) Config, everything below reads it
    config: Config = load_config(env, dotenv=env is None)
    logger.setLevel(config.LOG_LEVEL)

    # static_folder=None: public/ is mounted explicitly at the end
    app = Flask("webapp", static_folder=None, template_folder=None)
    app.config.from_mapping(config.model_dump())

    ctx = AppContext(config=config, options=options)
    app.extensions[EXTENSION_KEY] = ctx
    _advance(ctx, Stage.CONFIG_LOADED)

    # 2) Plugins, then 3) routes (routes may use plugin decorations)
    if plugins is None:
        from .plugins import PLUGINS as plugins
    register_all(app, ctx, plugins, options)
    _advance(ctx, Stage.PLUGINS_REGISTERED)

    if routes is None:
        from .routes import ROUTES as routes
    register_all(app, ctx, routes, options)
    _advance(ctx, Stage.ROUTES_REGISTERED)

    # 4) One shared MongoDB client, closed unconditionally at exit
    mongo = MongoConnector(
        config.MONGODB_URI,
        force_close=True,
        server_selection_timeout_ms=config.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        database=config.MONGODB_DATABASE,
        client_factory=client_factory,
    )
    ctx.mongo = mongo.connect()
    _advance(ctx, Stage.DATABASE_CONNECTED)

    # 5) Server-side templates from views/
    views = ViewRenderer(VIEWS_DIR, engine="jinja2")
    views.init_app(app)
    ctx.views = views
    _advance(ctx, Stage.VIEW_READY)

    # 6) public/ served at "/"
    mount_static(app, PUBLIC_DIR, prefix="/")
    _advance(ctx, Stage.STATIC_READY)

    _advance(ctx, Stage.SERVING)
    return app
