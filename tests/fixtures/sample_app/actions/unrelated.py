from sample_app import hooks


class Unrelated:
    """Looks like an action but does not extend Action."""

    @classmethod
    def register(cls):
        hooks.CALLS.append("unrelated")


def helper():
    return 42
