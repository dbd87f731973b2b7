"""Ordered, first-match-wins classification of backend errors."""

from collections.abc import Sequence
from dataclasses import dataclass

from api.errors.models import BackendError, ClassifiedError

GENERAL_ERROR_MESSAGE = "Something went wrong in the server"


@dataclass(frozen=True)
class Rule:
    """Maps one backend error code to a client-facing error.

    A ``message`` of None passes the backend's own message through.
    A ``code`` of None matches every error.
    """

    code: str | None
    http_status: int
    message: str | None = None

    def matches(self, error: BackendError) -> bool:
        return self.code is None or self.code == error.code

    def apply(self, error: BackendError) -> ClassifiedError:
        message = error.message if self.message is None else self.message
        return ClassifiedError(http_status=self.http_status, message=message)


FALLBACK_RULE = Rule(code=None, http_status=500, message=GENERAL_ERROR_MESSAGE)


class ErrorClassifier:
    """Evaluates rules top to bottom; the first match wins.

    The fallback rule is always appended last, so every backend error
    yields exactly one classified error.
    """

    def __init__(self, rules: Sequence[Rule], fallback: Rule = FALLBACK_RULE):
        self.rules: tuple[Rule, ...] = (*rules, fallback)

    def classify(self, error: BackendError) -> ClassifiedError:
        """Classify a backend error.

        Args:
            error: Error code and message reported by the identity provider.

        Returns:
            The ClassifiedError produced by the first matching rule.
        """
        for rule in self.rules:
            if rule.matches(error):
                return rule.apply(error)
        # Only reached when a conditional fallback was supplied
        return FALLBACK_RULE.apply(error)
