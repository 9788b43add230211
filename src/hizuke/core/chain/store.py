"""Session-owned holder of the current chain state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .codec import QueryPairs, encode
from .models import State

logger = logging.getLogger(__name__)

QuerySink = Callable[[QueryPairs], None]
StateEdit = Callable[[State], State]


class StateStore:
    """
    Holds the single State of a session.

    Every replacement is re-encoded and handed to `sink`, which is where the
    caller publishes the query (address bar, stdout, ...). That is the only
    side effect of replacing state.
    """

    def __init__(self, initial: State, sink: QuerySink | None = None) -> None:
        self._state = initial
        self._sink = sink

    def get_state(self) -> State:
        return self._state

    def replace_state(self, new_state: State) -> None:
        self._state = new_state
        query = encode(new_state)
        logger.debug("State replaced; publishing %d query parameter(s).", len(query))
        if self._sink is not None:
            self._sink(query)

    def update(self, edit: StateEdit) -> State:
        self.replace_state(edit(self._state))
        return self._state
