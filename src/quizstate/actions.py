from typing import Literal, Union

from pydantic import BaseModel

from .models import Answer, Question


# --- Actions ---
class SetQuestion(BaseModel):
    type: Literal["setQuestion"] = "setQuestion"
    question: Question


class SetAnswerSelected(BaseModel):
    type: Literal["setAnswerSelected"] = "setAnswerSelected"
    answer_id: str
    is_selected: bool


class SetQuestionValidated(BaseModel):
    type: Literal["setQuestionValidated"] = "setQuestionValidated"
    question_id: str
    is_validated: bool


Action = Union[SetQuestion, SetAnswerSelected, SetQuestionValidated]


# --- Action creators ---
def set_question(question: Question) -> SetQuestion:
    return SetQuestion(question=question)


def set_answer_selected(answer: Answer, is_selected: bool = True) -> SetAnswerSelected:
    return SetAnswerSelected(answer_id=answer.id, is_selected=is_selected)


def set_question_validated(
    question: Question, is_validated: bool = True
) -> SetQuestionValidated:
    return SetQuestionValidated(question_id=question.id, is_validated=is_validated)
