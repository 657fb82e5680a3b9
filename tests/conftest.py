"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_game.config import Settings, get_settings
from maze_game.core.maze_parser import parse_maze_text
from maze_game.core.maze_state import MazeState
from maze_game.main import app
from maze_game.services.session_store import get_session_store


# Sample maze for testing: S at (1, 1), E at (3, 3)
SIMPLE_MAZE = """#####
#S  #
# # #
#  E#
#####"""


@pytest.fixture
def simple_maze() -> MazeState:
    """A freshly parsed 5x5 maze."""
    return parse_maze_text(SIMPLE_MAZE)


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the bundled mazes, isolated from the environment."""
    return Settings(_env_file=None)


@pytest_asyncio.fixture(scope="function")
async def client(test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
    get_session_store().clear()
