from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


# --- Models ---
class QuestionType(str, Enum):
    UCQ = "UCQ"
    MCQ = "MCQ"


class Answer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    is_correct: bool = Field(False, alias="isCorrect")
    is_selected: bool = Field(False, alias="isSelected")


class Question(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: QuestionType
    text: str
    answers: List[Answer]
    is_validated: bool = Field(False, alias="isValidated")


class ValidationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answers_ids: List[str] = Field(default_factory=list, alias="answersIds")
