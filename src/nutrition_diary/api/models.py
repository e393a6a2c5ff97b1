"""Request models for the HTTP API."""

import datetime as dt

from pydantic import BaseModel, Field


class AnalyzeFoodRequest(BaseModel):
    """Free-text meal description to analyze."""

    description: str | int | float | None = None

    def text(self) -> str | None:
        """Return the description as text, or None when it is missing."""
        if self.description is None or self.description == "":
            return None
        return str(self.description)


class AnalyzeFoodResponse(BaseModel):
    """Estimate returned for a meal description."""

    result: str


class TargetRequest(BaseModel):
    """Raw body metrics as submitted by the calculator form."""

    weight: float | str | None = None
    height: float | str | None = None
    age: int | float | str | None = None
    gender: str | None = None
    activity: float | str | None = None


class RegisterRequest(BaseModel):
    """New user registration."""

    email: str
    name: str


class EntryRequest(BaseModel):
    """Daily entry submission; ``date`` defaults to the current UTC day."""

    date: dt.date | None = None
    calories: int = Field(ge=0)
    proteins: int = Field(ge=0)
    fats: int = Field(ge=0)
    carbs: int = Field(ge=0)
    water: int = Field(ge=0)
    limit_exceeded: bool = False
