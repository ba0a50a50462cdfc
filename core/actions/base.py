"""
Base Action - contract for self-registering units of application behaviour.
"""

from abc import ABC, abstractmethod
import inspect


class Action(ABC):
    """
    Abstract base class for all actions.

    A concrete action implements ``register()``, which wires the action into
    the host application (service bindings, routes, commands...). The
    ActionManager calls it at most once per process.

    Intermediate base classes that implement every abstract method but are
    not meant to be registered can opt out with ``__abstract__ = True`` in
    their own class body. The flag is not inherited.
    """

    __abstract__ = True

    @classmethod
    @abstractmethod
    def register(cls) -> None:
        """Self-registration hook, called with no arguments."""

    @classmethod
    def identifier(cls) -> str:
        """Fully-qualified name used as the registration key."""
        return f"{cls.__module__}.{cls.__qualname__}"

    @classmethod
    def is_concrete(cls) -> bool:
        if inspect.isabstract(cls):
            return False
        return not cls.__dict__.get("__abstract__", False)
