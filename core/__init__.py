from .actions import (
    Action, ActionManager, ActionError, ActionReflectionError, boot_actions
)
from .logging_config import configure_logging
