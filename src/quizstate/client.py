import logging
import sys
from typing import Optional

from .actions import set_question
from .config import settings
from .errors import QuizStateError
from .gateway import HttpQuestionGateway
from .log import setup_logging
from .models import Question
from .question_bank import QuestionBank
from .selectors import select_answers
from .store import Dependencies, Store, init_store
from .thunks import select_answer, validate_question

logger = logging.getLogger(__name__)


def run_demo(store: Store, question: Question) -> Optional[Question]:
    """Select the first then the second answer of `question` and validate it."""
    store.dispatch(set_question(question))

    answers = select_answers(store.get_state())
    for answer in answers[:2]:
        store.dispatch(select_answer(answer))

    store.dispatch(validate_question())

    state = store.get_state()
    logger.info(f"Final state: {state.model_dump_json(by_alias=True)}")
    return state


def main() -> int:
    setup_logging()

    store = init_store(Dependencies(question_gateway=HttpQuestionGateway()))
    bank = QuestionBank(settings.QUESTION_DIR)
    question = bank.get_question(bank.get_question_ids()[0])

    try:
        run_demo(store, question)
    except QuizStateError:
        logger.exception("Demo run failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
