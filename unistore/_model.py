from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, create_model

from ._errors import InvalidFieldError, UnknownFieldError


__all__ = (
    "Model",

    "define",
    "is_same_reference",
)


M = TypeVar("M", bound="Model")


def _check_fields(model: type[Model], names: Iterable[str]) -> None:
    unknown = [name for name in names if name not in model.model_fields]

    if unknown:
        raise UnknownFieldError(model, unknown)


def _check_field_names(base: type[Model], names: tuple[str, ...]) -> None:
    seen: set[str] = set()

    for name in names:
        if not name.isidentifier() or name.startswith("_"):
            raise InvalidFieldError(f"Invalid field name: {name!r}")

        if name in seen:
            raise InvalidFieldError(f"Duplicate field name: {name!r}")

        if hasattr(base, name):
            raise InvalidFieldError(
                f"Field name {name!r} shadows an attribute of "
                f"{base.__qualname__}"
            )

        seen.add(name)


def is_same_reference(a: Any, b: Any) -> bool:
    return a is b


class Model(BaseModel):
    """Immutable record with structural equality.

    Instances are frozen: fields are set once at construction and changed
    only by deriving a new instance with :meth:`update`.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True
    )

    def __init__(self, /, **data: Any) -> None:
        _check_fields(type(self), data)

        super().__init__(**data)

    @classmethod
    def define(
        cls: Type[M],
        *field_names: str,
        name: Optional[str] = None,
        extend: Optional[type] = None
    ) -> Type[M]:
        _check_field_names(cls, field_names)

        base: Any = cls if extend is None else (extend, cls)
        fields: dict[str, Any] = {
            field_name: (Any, None) for field_name in field_names
        }

        model = create_model(  # type: ignore[call-overload]
            name or cls.__name__,
            __base__=base,
            __module__=cls.__module__,
            **fields
        )

        model.__match_args__ = tuple(model.model_fields)

        return model

    @classmethod
    def new(
        cls: Type[M],
        fields: Optional[Mapping[str, Any]] = None,
        /,
        allow_unknown: bool = False
    ) -> M:
        data = dict(fields or {})

        if allow_unknown:
            data = {
                key: value
                for key, value in data.items()
                if key in cls.model_fields
            }

        return cls(**data)

    def get(self, name: str) -> Any:
        _check_fields(type(self), (name,))

        return getattr(self, name)

    def update(
        self: M,
        fields: Optional[Mapping[str, Any]] = None,
        /,
        **changes: Any
    ) -> M:
        """Return a copy of this record with the given fields replaced."""
        data = {**(fields or {}), **changes}

        _check_fields(type(self), data)

        return type(self).model_validate({**dict(self), **data})

    def equals(self, other: Any) -> bool:
        return type(other) is type(self) and self == other


define = Model.define
