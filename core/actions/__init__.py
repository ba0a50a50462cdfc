"""
Action discovery and registration - core exports.
"""

from .base import Action
from .exceptions import ActionError, ActionReflectionError
from .manager import ActionManager
from .provider import boot_actions, ensure_importable
from .discovery import (
    resolve_paths, iter_files, module_name_from_pathname,
    identifiers_from_pathname, classname_from_pathname,
    load_identifier, identifier_of
)

__all__ = [
    'Action',
    'ActionError',
    'ActionReflectionError',
    'ActionManager',
    'boot_actions',
    'ensure_importable',
    'resolve_paths',
    'iter_files',
    'module_name_from_pathname',
    'identifiers_from_pathname',
    'classname_from_pathname',
    'load_identifier',
    'identifier_of',
]
