from typing import List, Optional

from .errors import QuestionNotSetError
from .models import Answer, Question


def select_question(state: Optional[Question]) -> Question:
    if state is None:
        raise QuestionNotSetError("question is null")
    return state


def select_answers(state: Optional[Question]) -> List[Answer]:
    return select_question(state).answers


def select_selected_answers(state: Optional[Question]) -> List[Answer]:
    return [answer for answer in select_answers(state) if answer.is_selected]
