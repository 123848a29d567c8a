"""Pydantic request/response schemas for the FastAPI endpoints."""

from pydantic import BaseModel

from src.strength.evaluator import ColorTag


class PasswordRequest(BaseModel):
    """Request body carrying the password to score."""

    password: str


class StrengthResponse(BaseModel):
    """Full strength report for a password."""

    score: int
    label: str
    color_tag: ColorTag
    suggestions: list[str]


class MeterResponse(BaseModel):
    """Strength meter display for a sign-up form."""

    visible: bool
    score: int
    label: str
    color_tag: ColorTag
    color: str
    suggestions: list[str]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
