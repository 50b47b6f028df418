class QuizStateError(Exception):
    """Base class for quizstate errors."""


class QuestionNotSetError(QuizStateError):
    """Raised when a selector needs a question and the store holds none."""


class ValidationFailedError(QuizStateError):
    """Raised when the gateway reports that validation did not succeed."""


class GatewayError(QuizStateError):
    """Raised when the validation endpoint cannot be reached."""
