from typing import Callable, Generic, TypeVar


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Reducer",
    "ReducerFunction",
)


ReducerFunction = Callable[[S, A], S]


class Reducer(Generic[S, A]):
    def apply(self, state: S, action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)
