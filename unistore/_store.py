from __future__ import annotations

import logging

from inspect import signature
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    TypeVar,
    Union,
    get_type_hints
)

from ._errors import DispatchError
from ._reducer import Reducer, ReducerFunction


__all__ = (
    "Observer",
    "StateFactory",
    "Store",
    "Unsubscribe",

    "create_store",
)


logger = logging.getLogger(__name__)


_MISSING: Any = object()


A = TypeVar("A")
S = TypeVar("S")


Observer = Callable[[S, S], None]
StateFactory = Callable[[], S]
Unsubscribe = Callable[[], None]


def _action_name(action: Any) -> str:
    return type(action).__qualname__


class Store(Generic[S, A]):
    _state: S
    _reducer: Union[Reducer[S, A], ReducerFunction[S, A]]

    _observers: list[Observer[S]]

    _is_reducing: bool

    def __init__(
        self,
        state: S,
        reducer: Union[Reducer[S, A], ReducerFunction[S, A]]
    ) -> None:
        self._state = state
        self._reducer = reducer

        self._observers = []

        self._is_reducing = False

    @property
    def state(self) -> S:
        return self._state

    def get_state(self) -> S:
        return self._state

    def _reduce(self, state: S, action: A) -> S:
        self._is_reducing = True

        try:
            return self._reducer(state, action)
        finally:
            self._is_reducing = False

    def _notify(self, previous_state: S, state: S) -> None:
        for observer in list(self._observers):
            observer(previous_state, state)

    def dispatch(self, action: A) -> S:
        if self._is_reducing:
            raise DispatchError("Reducers may not dispatch actions")

        previous_state = self._state
        state = self._reduce(previous_state, action)

        self._state = state

        logger.debug(
            "Dispatched %s (state %s)",
            _action_name(action),
            "unchanged" if state is previous_state else "changed"
        )

        self._notify(previous_state, state)

        return state

    def on_dispatch(self, observer: Observer[S]) -> None:
        self._observers.append(observer)

        logger.debug("Registered observer %r", observer)

    def subscribe(self, observer: Observer[S]) -> Unsubscribe:
        self.on_dispatch(observer)

        def unsubscribe() -> None:
            for index, registered in enumerate(self._observers):
                if registered is observer:
                    del self._observers[index]

                    logger.debug("Removed observer %r", observer)

                    return

        return unsubscribe


def _get_reducer_state_type(
    reducer: Union[Reducer[S, A], ReducerFunction[S, A]]
) -> type[S]:
    function = reducer.apply if isinstance(reducer, Reducer) else reducer

    parameters = list(signature(function).parameters)

    if len(parameters) != 2:
        raise TypeError("Reducer must take exactly two parameters")

    state_type = get_type_hints(function).get(parameters[0])

    if not isinstance(state_type, type):
        raise TypeError("Reducer must have a state type annotation")

    return state_type


def create_store(
    reducer: Union[Reducer[S, A], ReducerFunction[S, A]],
    initial_state: S = _MISSING,
    initial_state_factory: Optional[StateFactory[S]] = None
) -> Store[S, A]:
    if initial_state is not _MISSING and initial_state_factory is not None:
        raise ValueError(
            "initial_state and initial_state_factory are mutually exclusive"
        )

    if initial_state is _MISSING:
        factory = initial_state_factory or _get_reducer_state_type(reducer)
        initial_state = factory()

    return Store(initial_state, reducer)
