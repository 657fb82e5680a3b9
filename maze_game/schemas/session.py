"""Session schemas for request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class GenerateOptions(BaseModel):
    """Options for a procedurally generated maze."""

    seed: Optional[int] = None
    min_size: Optional[int] = Field(None, ge=1)
    max_size: Optional[int] = Field(None, ge=1)


class SessionCreateRequest(BaseModel):
    """Schema for creating a new session. Exactly one maze source is allowed."""

    maze: Optional[str] = Field(None, description="Name of a bundled maze")
    grid_data: Optional[str] = Field(None, description="Maze text to load")
    generate: Optional[GenerateOptions] = None

    @model_validator(mode="after")
    def exactly_one_source(self) -> "SessionCreateRequest":
        given = [v for v in (self.maze, self.grid_data, self.generate) if v is not None]
        if len(given) != 1:
            raise ValueError("Provide exactly one of: maze, grid_data, generate")
        return self


class SessionPosition(BaseModel):
    """Schema for position in a session."""

    x: int
    y: int


class SessionState(BaseModel):
    """Schema for session state."""

    id: str
    source: str
    width: int
    height: int
    player_position: SessionPosition
    exit_position: SessionPosition
    move_count: int
    status: str  # active, quit, completed
    created_at: datetime


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="^(up|down|left|right)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    outcome: str  # moved, blocked_by_boundary, blocked_by_wall, reached_exit
    message: str
    position: SessionPosition
    moves: int
    status: str


class CommandRequest(BaseModel):
    """Schema for a raw console command (W/A/S/D/M/Q)."""

    command: str = Field(..., min_length=1, max_length=100)


class CommandResponse(BaseModel):
    """Schema for command response."""

    action: str  # move, map, quit, invalid
    message: Optional[str] = None
    outcome: Optional[str] = None
    rows: list[str] = []
    position: SessionPosition
    status: str


class MapResponse(BaseModel):
    """Schema for the rendered map."""

    rows: list[str]
    player_position: SessionPosition
