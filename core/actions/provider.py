"""
Application start-up hook for action discovery.
"""

import os
import sys
from typing import Optional
import structlog

from config import Config, config
from .manager import ActionManager

log = structlog.get_logger()


def ensure_importable(app_path: str) -> None:
    """Put the parent of the application package on ``sys.path`` if missing."""
    app_root = os.path.dirname(os.path.abspath(app_path))
    if app_root not in sys.path:
        sys.path.insert(0, app_root)


def boot_actions(
    cfg: Optional[Config] = None,
    manager: Optional[ActionManager] = None
) -> ActionManager:
    """
    Build (or take) a manager and register everything under its search paths.

    Actions are loaded by dotted name, so the parent of ``cfg.app_path`` has
    to be on ``sys.path`` (see ``ensure_importable``).

    Args:
        cfg: Configuration to build the manager from (defaults to the global one)
        manager: Pre-configured manager to boot instead of building one

    Returns:
        The booted manager, owned by the caller
    """
    cfg = cfg or config
    if manager is None:
        manager = ActionManager.from_config(cfg)

    if not cfg.auto_register:
        log.info("Automatic action registration disabled")
        manager.dont_register()

    manager.register_all_paths()
    return manager
