"""Domain errors raised by the providers and the session reducer."""


class FoodAssistError(Exception):
    kind = "food_assist_error"


class AdviceProviderError(FoodAssistError):
    """The advice model could not produce an answer."""

    kind = "advice_provider_error"


class MalformedProviderResponseError(AdviceProviderError):
    """The model answered, but not in the expected structured shape."""

    kind = "malformed_provider_response"


class SubmissionInFlightError(FoodAssistError):
    kind = "submission_in_flight"


class InvalidTransitionError(FoodAssistError):
    kind = "invalid_transition"
