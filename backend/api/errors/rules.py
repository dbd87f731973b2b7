"""Per-operation classifier chains for Cognito error codes."""

from enum import StrEnum

from api.errors.classifier import ErrorClassifier, Rule


class Operation(StrEnum):
    """Identity operations exposed by the gateway."""

    CREATE_USER = "create_user"
    LOGIN = "login"
    CONFIRM_LOGIN = "confirm_login"
    LOGOUT = "logout"
    RESET_PASSWORD = "reset_password"
    UPDATE_USER = "update_user"
    FORGOT_PASSWORD = "forgot_password"
    CONFIRM_NEW_PASSWORD = "confirm_new_password"
    SIGN_UP = "sign_up"
    CONFIRM_SIGN_UP = "confirm_sign_up"
    GET_USER = "get_user"
    REFRESH_TOKEN = "refresh_token"


# Checked after the operation-specific rules, same order for every operation
SHARED_RULES: tuple[Rule, ...] = (
    Rule("InvalidParameterException", 400),
    Rule("AliasExistsException", 400, "An Account with this email already exists."),
    Rule(
        "CodeMismatchException",
        400,
        "Confirmation code does not match with the one provided through email.",
    ),
    Rule("ExpiredCodeException", 400, "Confirmation code has expired."),
    Rule(
        "TooManyRequestsException",
        400,
        "Too many requests to this service, please try again later.",
    ),
    Rule(
        "InvalidPasswordException",
        400,
        "The password does not meet the configure password criteria.",
    ),
    Rule("NotAuthorizedException", 400),
    Rule("ResourceNotFoundException", 400),
    Rule("UserNotFoundException", 400),
    Rule(
        "UserNotConfirmedException",
        400,
        "Your user is not confirmed yet, please contact support.",
    ),
)

_CODE_DELIVERY_FAILURE = Rule(
    "CodeDeliveryFailureException",
    400,
    "There was a problem delivering the confirmation code for the user.",
)
_USERNAME_EXISTS = Rule(
    "UsernameExistsException", 400, "The username you are trying to use already exist."
)
_LOGIN_PASSWORD_RESET = Rule(
    "PasswordResetRequiredException", 400, "Finish resetting your password to be able to login"
)
_PASSWORD_RECOVERY_RULES = (
    Rule("LimitExceededException", 429, "Attempt limit exceeded, please try after some time."),
    Rule("TooManyFailedAttemptsException", 429, "Too many fail attempts, please try again later"),
    Rule(
        "UserNotConfirmedException",
        400,
        "Your user is not confirmed, please login and confirm it first",
    ),
    Rule(
        "InvalidEmailRoleAccessPolicyException",
        400,
        "Your email is not confirmed, please contact an Admin for support.",
    ),
)

OPERATION_RULES: dict[Operation, tuple[Rule, ...]] = {
    Operation.CREATE_USER: (
        _CODE_DELIVERY_FAILURE,
        Rule(
            "UnsupportedUserStateException",
            400,
            "A problem with user state happened, probably because the user exist "
            "already in an unsupported state.",
        ),
        _USERNAME_EXISTS,
    ),
    Operation.LOGIN: (_LOGIN_PASSWORD_RESET,),
    Operation.REFRESH_TOKEN: (_LOGIN_PASSWORD_RESET,),
    Operation.CONFIRM_LOGIN: (
        Rule(
            "InvalidUserPoolConfigurationException",
            400,
            "Please make sure that the User Pool is configured properly.",
        ),
        Rule("PasswordResetRequiredException", 400, "A Password reset is required."),
    ),
    Operation.FORGOT_PASSWORD: _PASSWORD_RECOVERY_RULES,
    Operation.RESET_PASSWORD: _PASSWORD_RECOVERY_RULES,
    Operation.CONFIRM_NEW_PASSWORD: _PASSWORD_RECOVERY_RULES,
    Operation.SIGN_UP: (
        Rule(
            "InvalidEmailRoleAccessPolicyException",
            400,
            "For some reason your email could not be use for sign up.",
        ),
        _CODE_DELIVERY_FAILURE,
        _USERNAME_EXISTS,
    ),
    Operation.CONFIRM_SIGN_UP: (
        Rule(
            "TooManyFailedAttemptsException", 400, "Too many fail attempts, please try again later"
        ),
        Rule("LimitExceededException", 429, "Attempt limit exceeded, please try after some time."),
    ),
    Operation.LOGOUT: (),
    Operation.GET_USER: (),
    Operation.UPDATE_USER: (),
}


def build_classifier(operation: Operation) -> ErrorClassifier:
    """Build the classifier chain for an operation: specific rules, then shared ones."""
    return ErrorClassifier((*OPERATION_RULES[operation], *SHARED_RULES))


CLASSIFIERS: dict[Operation, ErrorClassifier] = {
    operation: build_classifier(operation) for operation in Operation
}


def get_classifier(operation: Operation) -> ErrorClassifier:
    """Get the classifier chain for an operation."""
    return CLASSIFIERS[operation]
