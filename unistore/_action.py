from __future__ import annotations

from typing import Optional, Type

from ._model import Model


__all__ = (
    "Action",

    "with_attributes",
)


class Action(Model):
    @classmethod
    def with_attributes(
        cls,
        *field_names: str,
        name: Optional[str] = None,
        body: Optional[type] = None
    ) -> Type[Action]:
        return cls.define(*field_names, name=name, extend=body)


with_attributes = Action.with_attributes
