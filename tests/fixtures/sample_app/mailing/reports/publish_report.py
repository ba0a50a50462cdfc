from core.actions import Action
from sample_app import hooks


class PublishReport(Action):
    @classmethod
    def register(cls):
        hooks.CALLS.append(cls.identifier())
