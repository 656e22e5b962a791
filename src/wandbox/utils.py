"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module, reload
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    if package_name in modules:
        module = modules[package_name]
        reload(module)
    else:
        module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def read_text(path: Path) -> str:
    """Read a UTF-8 text file given on the command line.

    Raises:
        ValidationError: Raised if the file cannot be read or is not UTF-8 text.
    """
    from .exceptions import ValidationError

    try:
        return path.read_text(encoding="utf8")
    except UnicodeDecodeError as e:
        msg = f"{path} is not UTF-8 text"
        raise ValidationError(msg) from e
    except OSError as e:
        msg = f"cannot read {path}: {e.strerror}"
        raise ValidationError(msg) from e
