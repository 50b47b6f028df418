import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .gateway import QuestionGateway
from .models import Question
from .reducer import reducer as question_reducer

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@dataclass
class Dependencies:
    question_gateway: QuestionGateway


class Store:
    """Holds the current question and applies actions through a reducer.

    Callables passed to `dispatch` are treated as thunks and receive
    `(dispatch, get_state, dependencies)`.
    """

    def __init__(
        self,
        reducer: Callable,
        dependencies: Dependencies,
        initial_state: Optional[Question] = None,
    ):
        self.reducer = reducer
        self.dependencies = dependencies
        self._state = initial_state
        self._listeners: List[Listener] = []

    def get_state(self) -> Optional[Question]:
        return self._state

    def dispatch(self, action: Any) -> Any:
        if callable(action):
            return action(self.dispatch, self.get_state, self.dependencies)

        logger.debug(f"Dispatching {action.type}: {action!r}")
        self._state = self.reducer(self._state, action)
        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


def init_store(dependencies: Dependencies) -> Store:
    return Store(question_reducer, dependencies)
