"""
CLI entrypoint for the helloworld web service.

Flags override HELLOWORLD_* environment variables, which override built-in defaults.
Exit codes: 0 after a clean drain, 1 when the listener cannot bind or shutdown fails.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from helloworld.api.errors import ServerFatalError
from helloworld.api.lifecycle.server import ServerLifecycle
from helloworld.api.logging.logging_config import configure_logging
from helloworld.api.main import create_app
from helloworld.api.settings import Settings, get_settings

logger = logging.getLogger("helloworld.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="helloworld", description="Serve the helloworld page.")
    p.add_argument("--binding", default=None, help="Server listen address (default 0.0.0.0:5000)")
    p.add_argument("--redis", default=None, help="Redis address (not required, default redis:6379)")
    p.add_argument("--static-dir", type=Path, default=None, help="Directory holding index.html and assets")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=None,
    )
    return p


def settings_from_args(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    settings = base or get_settings()

    update: dict[str, object] = {}
    if args.binding:
        update["binding"] = args.binding
    if args.redis:
        update["redis_address"] = args.redis
    if args.static_dir is not None:
        update["static_dir"] = args.static_dir
    if args.log_level:
        update["log_level"] = args.log_level

    return settings.model_copy(update=update) if update else settings


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    configure_logging(settings.log_level)

    lifecycle = ServerLifecycle(settings)
    app = create_app(settings, liveness=lifecycle.liveness)

    try:
        lifecycle.run(app)
    except ServerFatalError:
        # Already logged at CRITICAL by the lifecycle controller.
        raise SystemExit(1)


if __name__ == "__main__":
    main()
