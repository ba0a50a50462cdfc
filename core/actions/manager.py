"""
Action Manager - discovers actions on disk and registers each exactly once.

Usage:
    manager = ActionManager().paths(["app/actions", "modules/billing/actions"])
    manager.register_all_paths()

    # Or one at a time
    manager.register("app.actions.send_email.SendEmail")
    manager.register(SendEmail)
"""

import inspect
from typing import Any, Callable, Iterable, List, Optional, Tuple
import structlog

from config import config
from .base import Action
from .discovery import (
    identifier_of, identifiers_from_pathname, iter_files,
    load_identifier, resolve_paths,
)

log = structlog.get_logger()

Resolver = Callable[[str, str, str], Iterable[str]]
Finder = Callable[[Iterable[str]], Iterable[str]]


class ActionManager:
    """
    Owns the list of registered actions for one application.

    Not thread-safe: callers sharing a manager across threads must serialize
    calls to ``register`` and ``register_all_paths``.
    """

    def __init__(
        self,
        base_path: Optional[str] = None,
        app_path: Optional[str] = None,
        app_package: Optional[str] = None,
        paths: Any = None,
        resolver: Resolver = identifiers_from_pathname,
        finder: Finder = iter_files
    ):
        self.base_path = base_path if base_path is not None else config.base_path
        self.app_path = app_path if app_path is not None else config.app_path
        self.app_package = app_package if app_package is not None else config.app_package
        self.resolver = resolver
        self.finder = finder

        self._paths: List[str] = []
        self._registered: List[str] = []

        self.paths(paths if paths is not None else config.action_paths)

    @classmethod
    def from_config(cls, cfg=None, **kwargs) -> "ActionManager":
        """Build a manager from a Config instance (defaults to the global one)."""
        cfg = cfg or config
        return cls(
            base_path=cfg.base_path,
            app_path=cfg.app_path,
            app_package=cfg.app_package,
            paths=cfg.action_paths,
            **kwargs
        )

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    def paths(self, paths) -> "ActionManager":
        """Replace the search paths. Missing directories are dropped silently."""
        self._paths = resolve_paths(paths, self.base_path)
        return self

    def dont_register(self) -> "ActionManager":
        """Disable automatic registration by clearing every search path."""
        self._paths = []
        return self

    @property
    def search_paths(self) -> Tuple[str, ...]:
        return tuple(self._paths)

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register_all_paths(self) -> None:
        """Register every action found below the search paths."""
        if not self._paths:
            return

        before = len(self._registered)
        for pathname in self.finder(self._paths):
            for identifier in self.resolver(pathname, self.app_path, self.app_package):
                self.register(identifier)

        log.debug("Actions discovered",
                  paths=list(self._paths),
                  registered=len(self._registered) - before)

    def register(self, action) -> None:
        """
        Register one action given as identifier, class or instance.

        Non-actions and already registered actions are ignored. Errors raised
        by the action's hook propagate and leave it unregistered.

        Raises:
            ActionReflectionError: A string identifier could not be loaded
        """
        if not self.is_action(action) or self.is_registered(action):
            log.debug("Action skipped", action=identifier_of(action))
            return

        self._resolve_class(action).register()
        self._registered.append(identifier_of(action))

        log.debug("Action registered", action=identifier_of(action))

    def is_action(self, action) -> bool:
        """True for concrete subclasses of Action (or their instances)."""
        cls = self._resolve_class(action)
        return (
            inspect.isclass(cls)
            and issubclass(cls, Action)
            and cls.is_concrete()
        )

    def is_registered(self, action) -> bool:
        return identifier_of(action) in self._registered

    def get_registered_actions(self) -> Tuple[str, ...]:
        """Identifiers registered so far, in registration order."""
        return tuple(self._registered)

    @staticmethod
    def _resolve_class(action):
        if isinstance(action, str):
            return load_identifier(action)
        if inspect.isclass(action):
            return action
        return type(action)
