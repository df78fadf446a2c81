# webapp/registry.py

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Union

from flask import Flask

from .context import AppContext
from .errors import RegistrationError

logger = logging.getLogger(__name__)

RegisterFn = Callable[[Flask, AppContext, Dict[str, Any]], None]


class Registration(NamedTuple):
    name: str
    register: RegisterFn


def from_module(module: ModuleType) -> Registration:
    """Wrap a plugin/route module exposing `register(app, ctx, options)`."""
    register = getattr(module, "register", None)
    if not callable(register):
        raise TypeError(f"{module.__name__} has no register(app, ctx, options)")
    return Registration(module.__name__.rsplit(".", 1)[-1], register)


def discover(package: Union[str, ModuleType]) -> List[Registration]:
    """
    Directory scan alternative to a hand-written list:
    every module in `package` (sorted by name) that defines register().
    Modules starting with "_" are skipped.
    """
    if isinstance(package, str):
        package = importlib.import_module(package)

    found: List[Registration] = []
    for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        if info.name.startswith("_"):
            continue
        module = importlib.import_module(f"{package.__name__}.{info.name}")
        if callable(getattr(module, "register", None)):
            found.append(from_module(module))
    return found


def register_all(
    app: Flask,
    ctx: AppContext,
    registrations: Iterable[Registration],
    options: Optional[Dict[str, Any]] = None,
) -> None:
    """Run each registration in order. The first failure aborts startup."""
    for name, register in registrations:
        logger.debug("Registering %s", name)
        try:
            # each module gets its own copy
            register(app, ctx, dict(options or {}))
        except Exception as exc:
            logger.error("Registration of %s failed", name, exc_info=True)
            raise RegistrationError(name, exc) from exc
