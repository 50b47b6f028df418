"""
Pytest configuration and fixtures.
"""

from typing import List

import pytest

from quizstate.gateway import QuestionGateway
from quizstate.models import Answer, Question, QuestionType
from quizstate.store import Dependencies, init_store


class FakeQuestionGateway(QuestionGateway):
    def __init__(self, result: bool = True):
        self.result = result
        self.calls: List[List[str]] = []

    def validate(self, answers_ids: List[str]) -> bool:
        self.calls.append(list(answers_ids))
        return self.result


def make_question(question_type: QuestionType) -> Question:
    return Question(
        id="question1",
        type=question_type,
        text="How are you?",
        answers=[
            Answer(id="answer1", text="good", is_correct=True),
            Answer(id="answer2", text="baad", is_correct=False),
            Answer(id="answer3", text="fine", is_correct=True),
        ],
    )


@pytest.fixture
def ucq_question():
    return make_question(QuestionType.UCQ)


@pytest.fixture
def mcq_question():
    return make_question(QuestionType.MCQ)


@pytest.fixture
def gateway():
    return FakeQuestionGateway()


@pytest.fixture
def store(gateway):
    return init_store(Dependencies(question_gateway=gateway))
