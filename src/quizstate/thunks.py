import logging
from typing import Callable

from .actions import set_answer_selected, set_question_validated
from .errors import ValidationFailedError
from .models import Answer, QuestionType
from .selectors import select_question, select_selected_answers

logger = logging.getLogger(__name__)

Thunk = Callable


def select_answer(answer: Answer) -> Thunk:
    """Select `answer`; for UCQ questions the previous selection is dropped first."""

    def thunk(dispatch, get_state, dependencies):
        question = select_question(get_state())
        selected_answers = select_selected_answers(get_state())

        if question.type == QuestionType.UCQ and selected_answers:
            dispatch(set_answer_selected(selected_answers[0], False))

        dispatch(set_answer_selected(answer, True))

    return thunk


def deselect_answer(answer: Answer) -> Thunk:
    def thunk(dispatch, get_state, dependencies):
        select_question(get_state())
        dispatch(set_answer_selected(answer, False))

    return thunk


def validate_question() -> Thunk:
    """Send the current selection to the gateway and mark the question validated."""

    def thunk(dispatch, get_state, dependencies):
        question = select_question(get_state())
        answers_ids = [answer.id for answer in select_selected_answers(get_state())]

        success = dependencies.question_gateway.validate(answers_ids)

        if not success:
            raise ValidationFailedError("response not ok")

        logger.info(f"Question {question.id} validated")
        dispatch(set_question_validated(question))

    return thunk
