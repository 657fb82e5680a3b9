"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class MazeBase(BaseModel):
    """Base maze schema with common fields."""

    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MazeListItem(MazeBase):
    """Schema for maze list item (without grid rows)."""


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class MazeDetail(MazeBase):
    """Schema for detailed maze response with rendered rows."""

    start: MazePosition
    exit: MazePosition
    rows: list[str]


class MazeValidateRequest(BaseModel):
    """Schema for validating maze text."""

    grid_data: str = Field(..., min_length=1)


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None
    category: Optional[str] = None
