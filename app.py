# app.py – thin bootstrap, all logic lives in webapp package

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

# Load .env BEFORE creating the Flask app, LOG_LEVEL may come from it
load_dotenv()

from webapp import create_app  # noqa: E402
from webapp.errors import StartupError  # noqa: E402

logger = logging.getLogger("app")


def _parse_option(raw: str):
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run the web app")
    p.add_argument("--host", default=None, help="Default = HOST from config")
    p.add_argument("--port", type=int, default=None, help="Default = PORT from config")
    p.add_argument("--debug", action="store_true")
    p.add_argument(
        "--option",
        dest="options",
        action="append",
        type=_parse_option,
        default=[],
        metavar="KEY=VALUE",
        help="Passed to every plugin and route module (repeatable)",
    )
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # an unknown LOG_LEVEL is reported by create_app as a ConfigError
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = create_app(options=dict(args.options))
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        return 1

    config = app.extensions["webapp"].config
    logging.getLogger().setLevel(config.LOG_LEVEL)
    app.run(
        host=args.host or config.HOST,
        port=args.port or config.PORT,
        debug=args.debug,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
