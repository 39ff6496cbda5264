from __future__ import annotations

import atexit
import importlib
import logging
from types import ModuleType
from typing import Optional

import click
from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SWEEP_INTERVAL_MINUTES
from .diagnostics.controller import register as register_diagnostics
from .sweep.scheduler import build_scheduler, start_scheduler
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Keep request and scheduler chatter out of the sweep logs.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)


def register_commands(app: Flask, container: Container) -> None:
    @app.cli.command("sweep")
    def sweep():
        """Run the absence sweep once."""
        report = container.sweep_service.run()
        click.echo(
            f"{report.day}: {report.candidates} candidate sessions, "
            f"{len(report.finalized)} finalized, {report.marked} students marked absent"
        )
        for failure in report.failures:
            click.echo(f"  failed {failure.session_id}: {failure.error}", err=True)


def create_app(container: Optional[Container] = None) -> Flask:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", ["*"]))

    container = container or build_container(settings=settings)
    app.extensions["school_attendance"] = container

    register_users(app, container)
    register_diagnostics(app, container)
    register_commands(app, container)

    if getattr(settings, "SWEEP_ENABLED", False):
        scheduler = build_scheduler(
            container.sweep_service,
            zone=container.zone,
            interval_minutes=getattr(settings, "SWEEP_INTERVAL_MINUTES", DEFAULT_SWEEP_INTERVAL_MINUTES),
        )
        start_scheduler(scheduler)
        app.extensions["sweep_scheduler"] = scheduler
        atexit.register(lambda: scheduler.shutdown(wait=False))

    return app
