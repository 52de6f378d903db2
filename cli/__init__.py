"""Command line entry points for the sensor feed simulator."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# The Typer application lives in ``cli.app``; the package root does not
# re-export it so that tests can keep patching ``cli.app.build_default_simulation``.

__all__ = []
