# webapp/plugins/__init__.py
#
# Support plugins, registered before any route module.
# Order matters: later plugins may use what earlier ones decorate.

from webapp.registry import from_module

from . import cors, sensible, support

PLUGINS = [
    from_module(sensible),
    from_module(cors),
    from_module(support),
]

__all__ = ["PLUGINS"]
