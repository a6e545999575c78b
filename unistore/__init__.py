from ._action import Action, with_attributes
from ._errors import (
    DispatchError,
    InvalidFieldError,
    ModelError,
    StoreError,
    UnknownFieldError
)
from ._model import Model, define, is_same_reference
from ._reducer import Reducer, ReducerFunction
from ._store import (
    Observer,
    StateFactory,
    Store,
    Unsubscribe,
    create_store
)


__all__ = (
    "Action",
    "DispatchError",
    "InvalidFieldError",
    "Model",
    "ModelError",
    "Observer",
    "Reducer",
    "ReducerFunction",
    "StateFactory",
    "Store",
    "StoreError",
    "UnknownFieldError",
    "Unsubscribe",

    "create_store",
    "define",
    "is_same_reference",
    "with_attributes"
)
