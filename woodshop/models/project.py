from pydantic import BaseModel, Field
from typing import Optional


class StepRequest(BaseModel):
    text: str = Field(min_length=1)


class SliceUpdateRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)


class CompleteSliceRequest(BaseModel):
    photos: list[str] = []
    notes: Optional[str] = None
