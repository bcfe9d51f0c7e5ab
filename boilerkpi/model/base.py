import typing as t

import pydantic as p


class BaseModel(p.BaseModel):
    """Project base model; dumps use field aliases unless the caller says otherwise."""

    def model_dump(self, **kwargs: t.Any) -> dict[str, t.Any]:  # pyright: ignore [reportIncompatibleMethodOverride]
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)


class FrozenModel(BaseModel):
    model_config = p.ConfigDict(frozen=True)
