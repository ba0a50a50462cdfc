"""
Discovery helpers - path resolution, file enumeration and identifier lookup.

These are the collaborators the ActionManager is wired to. Each of them can be
swapped out on the manager (``resolver=``, ``finder=``) when an application
lays out its actions differently.
"""

import importlib
import inspect
import os
import pkgutil
from typing import Any, Iterable, Iterator, List, Optional, Union
import structlog

from .base import Action
from .exceptions import ActionReflectionError

log = structlog.get_logger()

PathLike = Union[str, "os.PathLike[str]"]

# Directories a recursive scan never descends into
IGNORED_DIRS = {"__pycache__"}


# =========================================================================
# PATHS
# =========================================================================

def resolve_paths(
    paths: Union[PathLike, Iterable[PathLike], None],
    base_path: str
) -> List[str]:
    """
    Normalize search paths.

    Relative paths are resolved against ``base_path``. Duplicates (after
    normalization) are dropped, as is anything that is not an existing
    directory. First-seen order is kept.

    Args:
        paths: A single path or an iterable of paths
        base_path: Application root for relative paths

    Returns:
        List of absolute directory paths
    """
    if paths is None:
        return []
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]

    resolved: List[str] = []
    for raw in paths:
        path = os.fspath(raw)
        if not os.path.isabs(path):
            path = os.path.join(base_path, path)
        path = os.path.abspath(path)

        if path in resolved:
            continue
        if not os.path.isdir(path):
            log.debug("Search path dropped, not a directory", path=path)
            continue
        resolved.append(path)

    return resolved


def iter_files(paths: Iterable[str]) -> Iterator[str]:
    """
    Recursively yield every file below the given directories.

    Hidden files and directories as well as ``__pycache__`` are skipped.
    """
    for root in paths:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                d for d in dirnames
                if not d.startswith(".") and d not in IGNORED_DIRS
            )
            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue
                yield os.path.join(dirpath, filename)


# =========================================================================
# IDENTIFIERS
# =========================================================================

def module_name_from_pathname(
    pathname: str,
    app_path: str,
    app_package: str
) -> Optional[str]:
    """
    Translate a source file into the dotted name of its module.

    ``<app_path>/actions/send_email.py`` becomes ``<app_package>.actions.send_email``
    and a package's ``__init__.py`` maps to the package itself.

    Returns:
        Module name, or None for non-Python files and files outside app_path
    """
    if not pathname.endswith(".py"):
        return None

    try:
        relative = os.path.relpath(os.path.abspath(pathname), os.path.abspath(app_path))
    except ValueError:
        # Different drive on Windows
        return None
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return None

    parts = relative[:-len(".py")].split(os.sep)
    if parts[-1] == "__init__":
        parts.pop()
    if not all(part.isidentifier() for part in parts):
        return None

    prefix = [app_package] if app_package else []
    return ".".join(prefix + parts) or None


def identifiers_from_pathname(
    pathname: str,
    app_path: str,
    app_package: str
) -> List[str]:
    """
    Default identifier resolver: import the file's module and list its actions.

    Only Action subclasses bound at module level under their own name are
    returned. Classes imported from elsewhere and classes built inside
    functions (whose qualname cannot be loaded back) are left out.

    Raises:
        ActionReflectionError: The module could not be imported
    """
    module_name = module_name_from_pathname(pathname, app_path, app_package)
    if module_name is None:
        log.debug("Skipping file, no module for path", path=pathname)
        return []

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise ActionReflectionError(module_name, f"import failed: {e}") from e

    return [
        f"{module_name}.{name}"
        for name, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module_name
        and obj.__qualname__ == name
        and issubclass(obj, Action)
    ]


def classname_from_pathname(
    pathname: str,
    app_path: str,
    app_package: str
) -> List[str]:
    """
    Identifier resolver for one-class-per-file layouts.

    ``send_email.py`` is expected to define ``SendEmail``. Nothing is imported
    here, a missing class only shows up when the identifier is loaded.
    """
    module_name = module_name_from_pathname(pathname, app_path, app_package)
    if module_name is None:
        return []

    stem = os.path.splitext(os.path.basename(pathname))[0]
    if stem == "__init__":
        return []

    class_name = "".join(word[:1].upper() + word[1:] for word in stem.split("_") if word)
    return [f"{module_name}.{class_name}"]


def load_identifier(identifier: str) -> Any:
    """
    Resolve a dotted identifier such as ``pkg.module.Class``.

    The ``pkg.module:Class`` form is refused, one type must map to one key.

    Raises:
        ActionReflectionError: The identifier is malformed or names nothing
    """
    if ":" in identifier:
        raise ActionReflectionError(identifier, "expected a dotted name without ':'")
    try:
        return pkgutil.resolve_name(identifier)
    except (ImportError, AttributeError, ValueError) as e:
        raise ActionReflectionError(identifier, str(e) or type(e).__name__) from e
    except Exception as e:
        raise ActionReflectionError(identifier, f"import failed: {e}") from e


def identifier_of(candidate: Any) -> str:
    """Registration key of a candidate: strings as-is, classes and instances by type."""
    if isinstance(candidate, str):
        return candidate
    cls = candidate if inspect.isclass(candidate) else type(candidate)
    return f"{cls.__module__}.{cls.__qualname__}"
