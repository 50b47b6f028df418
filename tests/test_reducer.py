from quizstate.actions import (
    set_answer_selected,
    set_question,
    set_question_validated,
)
from quizstate.models import Answer
from quizstate.reducer import reducer


def test_set_question_replaces_state(ucq_question, mcq_question):
    assert reducer(None, set_question(ucq_question)) is ucq_question
    assert reducer(ucq_question, set_question(mcq_question)) is mcq_question


def test_actions_on_empty_state_are_noops(ucq_question):
    answer = ucq_question.answers[0]
    assert reducer(None, set_answer_selected(answer)) is None
    assert reducer(None, set_question_validated(ucq_question)) is None


def test_set_answer_selected_only_touches_matching_answer(ucq_question):
    new_state = reducer(ucq_question, set_answer_selected(ucq_question.answers[1]))

    assert [a.id for a in new_state.answers] == ["answer1", "answer2", "answer3"]
    assert [a.is_selected for a in new_state.answers] == [False, True, False]
    # previous state untouched
    assert not any(a.is_selected for a in ucq_question.answers)


def test_set_answer_selected_can_deselect(ucq_question):
    answer = ucq_question.answers[0]
    state = reducer(ucq_question, set_answer_selected(answer, True))
    state = reducer(state, set_answer_selected(answer, False))
    assert not state.answers[0].is_selected


def test_unknown_answer_id_is_ignored(ucq_question):
    ghost = Answer(id="nope", text="?")
    new_state = reducer(ucq_question, set_answer_selected(ghost))
    assert new_state.answers == ucq_question.answers


def test_set_question_validated_only_changes_flag(mcq_question):
    state = reducer(mcq_question, set_answer_selected(mcq_question.answers[0]))
    validated = reducer(state, set_question_validated(state))

    assert validated.is_validated is True
    assert validated.answers == state.answers
    assert validated.text == state.text
    assert state.is_validated is False


def test_set_question_validated_ignores_question_id(ucq_question, mcq_question):
    other = mcq_question.model_copy(update={"id": "other"})
    validated = reducer(ucq_question, set_question_validated(other))
    assert validated.id == "question1"
    assert validated.is_validated is True
