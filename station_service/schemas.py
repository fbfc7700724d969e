from __future__ import annotations

from typing import Annotated, List, Union

from pydantic import BaseModel, StrictInt, StringConstraints, confloat, field_validator

StationName = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=255)]
# Finite JSON numbers only; strings, booleans, NaN and overflowing literals are rejected
Frequency = Union[StrictInt, confloat(strict=True, allow_inf_nan=False)]


class StationBase(BaseModel):
    name: str
    freq: float
    actual: bool = False


class StationCreate(BaseModel):
    name: StationName
    freq: Frequency
    actual: bool | None = False

    @field_validator("actual")
    @classmethod
    def _missing_actual(cls, v):
        # null is treated like an absent flag
        return False if v is None else v


class StationUpdate(BaseModel):
    name: StationName | None = None
    freq: Frequency | None = None
    actual: bool | None = None

    def changes(self) -> dict:
        # Absent and null fields leave the stored value untouched
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class StationOut(StationBase):
    id: str

    class Config:
        from_attributes = True


class StationList(BaseModel):
    stations: List[StationOut]


class StationEnvelope(BaseModel):
    station: StationOut
