from typing import Iterable


__all__ = (
    "DispatchError",
    "InvalidFieldError",
    "ModelError",
    "StoreError",
    "UnknownFieldError",
)


class ModelError(Exception):
    pass


class UnknownFieldError(ModelError):
    def __init__(self, model: type, fields: Iterable[str]) -> None:
        self.model = model
        self.fields = tuple(fields)

        super().__init__(
            f"{model.__qualname__} has no field(s): {', '.join(self.fields)}"
        )


class InvalidFieldError(ModelError):
    pass


class StoreError(Exception):
    pass


class DispatchError(StoreError):
    pass
