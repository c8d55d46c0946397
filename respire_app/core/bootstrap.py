"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

import click
from flask import Flask

from ..extensions import db, migrate
from .catalog_seeds import seed_catalog
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the 'respire' logger and the Flask app logger."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )

    if app.logger.handlers:
        return

    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    migrate.init_app(app, db)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_cli_commands(app: Flask) -> None:
    """Attach maintenance commands to the `flask` CLI."""

    @app.cli.command("seed-catalog")
    def seed_catalog_command():
        """Insert the default badge and goal-template catalogs."""
        created = seed_catalog()
        click.echo(f"Seeded {created['badges']} badges and {created['goal_templates']} goal templates.")


def initialize_database(app: Flask) -> None:
    """Create database tables and ensure the default catalogs exist."""

    from .. import models  # noqa: F401  # register every table on the metadata

    db.create_all()

    if app.config.get("SEED_CATALOG_ON_STARTUP", True):
        created = seed_catalog()
        if created["badges"] or created["goal_templates"]:
            app.logger.info(
                "Seeded catalog: %s badges, %s goal templates.",
                created["badges"],
                created["goal_templates"],
            )
        else:
            app.logger.info("Catalog already present, skipping seed step.")
