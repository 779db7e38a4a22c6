# skillswap/common/exceptions.py

from typing import Iterable


class SkillSwapError(Exception):
    """Base class for domain errors raised by the service layer."""


class ValidationError(SkillSwapError):
    """User input was rejected; recovered by re-presenting the form."""


class MissingFieldError(ValidationError):
    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class CollaboratorUnavailable(SkillSwapError):
    """
    An external collaborator (record store, remote chat API) failed.
    Callers log it and fall back to an empty or default view.
    """
