from typing import Optional

from .actions import Action, SetAnswerSelected, SetQuestion, SetQuestionValidated
from .models import Question


def reducer(state: Optional[Question], action: Action) -> Optional[Question]:
    """Return the next state for `action`. `state` is never modified."""
    if isinstance(action, SetQuestion):
        return action.question

    if state is None:
        return None

    if isinstance(action, SetQuestionValidated):
        return state.model_copy(update={"is_validated": action.is_validated})

    if isinstance(action, SetAnswerSelected):
        answers = [
            answer.model_copy(update={"is_selected": action.is_selected})
            if answer.id == action.answer_id
            else answer
            for answer in state.answers
        ]
        return state.model_copy(update={"answers": answers})

    return state
