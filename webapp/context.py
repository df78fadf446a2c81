# webapp/context.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from flask import current_app

from .config import Config

EXTENSION_KEY = "webapp"


class Stage(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONFIG_LOADED = "configuration-loaded"
    PLUGINS_REGISTERED = "plugins-registered"
    ROUTES_REGISTERED = "routes-registered"
    DATABASE_CONNECTED = "database-connected"
    VIEW_READY = "view-ready"
    STATIC_READY = "static-ready"
    SERVING = "serving"


@dataclass
class AppContext:
    """
    Everything handlers need, held in one place instead of being
    bolted onto the Flask object:

    - config: validated, read-only
    - mongo / views: filled in by create_app after plugins and routes
      are registered, so read them inside handlers, not at import time
    - decorations: capabilities added by plugins
    """

    config: Config
    options: Dict[str, Any] = field(default_factory=dict)
    mongo: Optional[Any] = None
    views: Optional[Any] = None
    decorations: Dict[str, Any] = field(default_factory=dict)
    stage: Stage = Stage.UNINITIALIZED

    def decorate(self, name: str, value: Any) -> None:
        if name in self.decorations:
            raise ValueError(f"Decoration {name!r} is already registered")
        self.decorations[name] = value

    def require(self, name: str) -> Any:
        try:
            return self.decorations[name]
        except KeyError:
            raise LookupError(
                f"Decoration {name!r} is not registered; "
                "is the plugin providing it listed before this module?"
            ) from None

    @property
    def db(self):
        if self.mongo is None:
            raise RuntimeError("Database is not connected yet")
        return self.mongo.db

    @property
    def render(self) -> Callable[..., str]:
        if self.views is None:
            raise RuntimeError("View renderer is not ready yet")
        return self.views.render


def get_context() -> AppContext:
    return current_app.extensions[EXTENSION_KEY]
