"""Provide general utility functions that would not fit in other modules."""

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


def write_text_atomically(path: Path, content: str) -> bool:
    """Write `content` to `path` only once it is fully available.

    The content goes to a temporary file first and is moved over `path` afterwards, \
    so that an interrupted run never leaves a half-written file behind. If `path` \
    already holds exactly `content`, it is left untouched (and its modification time \
    preserved).

    Args:
        path: Destination of the content.
        content: Text to write.

    Returns:
        True if the file was written, False if it already had the right content.
    """
    from filecmp import cmp
    from shutil import move
    from tempfile import NamedTemporaryFile

    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w", encoding="utf8", delete=False, dir=path.parent, suffix=".tmp"
    ) as fh:
        fh.write(content)
    try:
        if path.exists() and cmp(fh.name, str(path), shallow=False):
            return False
        move(fh.name, path)
        return True
    finally:
        with suppress(FileNotFoundError):
            Path(fh.name).unlink()
