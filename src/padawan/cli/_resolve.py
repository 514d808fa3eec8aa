"""Locate the App a CLI command should work on.

A target is either a script path (``examples/hello/app.py``) or an
importable module name (``myproject.web``), optionally followed by
``:name`` to pick a variable other than ``app``. Scripts are loaded
under their own module name, so an ``if __name__ == "__main__":
app.run()`` guard does not fire.
"""

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from padawan.app import App
from padawan.errors import ConfigurationError

DEFAULT_ATTRIBUTE = "app"


def split_target(target: str) -> tuple[str, str]:
    """Split ``"source:name"`` into its parts, defaulting the name to ``app``."""
    source, sep, name = target.rpartition(":")
    if sep and name.isidentifier():
        return source, name
    return target, DEFAULT_ATTRIBUTE


def _load_script(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"padawan_cli_{path.stem}", path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load {str(path)!r} as a Python module"
        raise ConfigurationError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def resolve_app(target: str) -> App:
    """Load the module named by *target* and return its App.

    Raises:
        ConfigurationError: The script or module cannot be found, or the
            variable is missing or is not an ``App``.
    """
    source, name = split_target(target)

    if source.endswith(".py"):
        path = Path(source)
        if not path.is_file():
            msg = f"No such script: {source!r}"
            raise ConfigurationError(msg)
        module = _load_script(path)
    else:
        try:
            module = importlib.import_module(source)
        except ModuleNotFoundError as exc:
            msg = f"Cannot import {source!r}: {exc}"
            raise ConfigurationError(msg) from exc

    app = getattr(module, name, None)
    if not isinstance(app, App):
        found = "nothing" if app is None else type(app).__name__
        msg = f"{source}:{name} must be a padawan App, found {found}"
        raise ConfigurationError(msg)
    return app


def load_app_or_exit(target: str) -> App:
    """Resolve *target* for a CLI command, exiting with status 1 on failure."""
    try:
        return resolve_app(target)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
