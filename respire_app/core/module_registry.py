"""Blueprint registry for the Respire API modules.

Every module lives under ``respire_app.modules.<name>`` and exposes one
blueprint named ``<name>_api_bp``, mounted at ``/api/<name>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string

API_PREFIX = "/api"


@dataclass(frozen=True)
class ModuleDefinition:
    """One API module and where its blueprint is mounted."""

    name: str

    @property
    def import_path(self) -> str:
        return f"respire_app.modules.{self.name}:{self.name}_api_bp"

    @property
    def url_prefix(self) -> str:
        return f"{API_PREFIX}/{self.name}"

    def load_blueprint(self) -> Blueprint:
        blueprint = import_string(self.import_path)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(f"{self.import_path} is {type(blueprint)!r}, expected a Flask Blueprint")
        return blueprint


DEFAULT_MODULES: Sequence[ModuleDefinition] = (
    ModuleDefinition("profiles"),
    ModuleDefinition("tracker"),
    ModuleDefinition("gamification"),
    ModuleDefinition("goals"),
)


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Mount each module's blueprint; module names must be unique."""

    seen = set()
    for module in modules:
        if module.name in seen:
            raise ValueError(f"Module '{module.name}' registered twice")
        seen.add(module.name)

        app.register_blueprint(module.load_blueprint(), url_prefix=module.url_prefix)
        app.logger.debug("Mounted %s at %s", module.name, module.url_prefix)


def register_default_modules(app: Flask) -> None:
    register_modules(app, DEFAULT_MODULES)
