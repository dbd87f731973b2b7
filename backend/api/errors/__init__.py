"""Error taxonomy: backend errors and their client-facing classification."""

from api.errors.classifier import FALLBACK_RULE, GENERAL_ERROR_MESSAGE, ErrorClassifier, Rule
from api.errors.models import BackendError, ClassifiedError, IdentityOperationError
from api.errors.rules import SHARED_RULES, Operation, get_classifier

__all__ = [
    "BackendError",
    "ClassifiedError",
    "ErrorClassifier",
    "FALLBACK_RULE",
    "GENERAL_ERROR_MESSAGE",
    "IdentityOperationError",
    "Operation",
    "Rule",
    "SHARED_RULES",
    "get_classifier",
]
