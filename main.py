"""
Action Discovery - Entry Point

Registers every action found under the configured search paths and lists
what was registered.
"""

import structlog

from config import config
from core import boot_actions, configure_logging
from core.actions import ensure_importable

log = structlog.get_logger()


def main(cfg=None):
    """Boot actions for the configured application."""
    cfg = cfg or config
    configure_logging(cfg.log_level)

    ensure_importable(cfg.app_path)

    manager = boot_actions(cfg)

    for identifier in manager.get_registered_actions():
        log.info("✓ Action registered", action=identifier)
    return manager


if __name__ == '__main__':
    main()
