"""
Errors raised while discovering and registering actions.

Only introspection problems are reported as errors. A candidate that is not
an action, or is already registered, is skipped silently; failures raised
by an action's own ``register()`` hook propagate untouched.
"""


class ActionError(Exception):
    """Base class for action registry errors."""


class ActionReflectionError(ActionError):
    """A candidate's type could not be loaded or introspected."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Cannot introspect action '{identifier}': {reason}")
