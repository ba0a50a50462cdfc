from core.actions import Action
from sample_app import hooks

FAIL = True
ATTEMPTS = 0


class FlakyAction(Action):
    @classmethod
    def register(cls):
        global ATTEMPTS
        ATTEMPTS += 1
        if FAIL:
            raise RuntimeError("container unavailable")
        hooks.CALLS.append(cls.identifier())
