# webapp/routes/__init__.py
#
# Request handlers. Registered after every plugin in webapp.plugins.

from webapp.registry import from_module

from . import example, health, pages, root

ROUTES = [
    from_module(root),
    from_module(example),
    from_module(pages),
    from_module(health),
]

__all__ = ["ROUTES"]
