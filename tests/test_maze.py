"""Tests for maze endpoints."""

import pytest
from httpx import AsyncClient


# Sample maze for testing
SIMPLE_MAZE = """#####
#S  #
# # #
#  E#
#####"""


@pytest.mark.asyncio
async def test_list_mazes(client: AsyncClient):
    """Bundled mazes are listed with their dimensions."""
    response = await client.get("/v1/maze")
    assert response.status_code == 200
    data = response.json()

    names = [m["name"] for m in data["mazes"]]
    assert "tutorial" in names
    assert "classic" in names
    assert data["total"] == len(data["mazes"])


@pytest.mark.asyncio
async def test_get_maze(client: AsyncClient):
    response = await client.get("/v1/maze/tutorial")
    assert response.status_code == 200
    data = response.json()

    assert data["width"] == 7
    assert data["height"] == 7
    assert data["start"] == {"x": 1, "y": 1}
    assert data["exit"] == {"x": 5, "y": 5}
    assert data["rows"][1] == "#X    #"
    assert data["rows"][5] == "#    E#"


@pytest.mark.asyncio
async def test_get_unknown_maze(client: AsyncClient):
    response = await client.get("/v1/maze/does-not-exist")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_mazes_custom_directory(client: AsyncClient, test_settings, tmp_path):
    (tmp_path / "mine.txt").write_text(SIMPLE_MAZE)
    (tmp_path / "broken.txt").write_text("###\n")
    test_settings.mazes_dir = tmp_path

    response = await client.get("/v1/maze")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 1
    assert data["mazes"][0] == {"name": "mine", "width": 5, "height": 5}


@pytest.mark.asyncio
async def test_validate_valid_maze(client: AsyncClient):
    response = await client.post("/v1/maze/validate", json={"grid_data": SIMPLE_MAZE})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "error": None, "category": None}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "grid_data,category",
    [
        ("#####\n#S E#\n#####", "out_of_bounds"),
        ("#####\n#####\n######\n#####\n#####", "not_rectangular"),
        ("#####\n#S@ #\n#   #\n#  E#\n#####", "invalid_character"),
        ("#####\n#SS #\n#   #\n#  E#\n#####", "duplicate_marker"),
        ("#####\n#S  #\n#   #\n#   #\n#####", "missing_marker"),
        ("#####\n#S# #\n### #\n#  E#\n#####", "unreachable"),
    ],
)
async def test_validate_invalid_maze(client: AsyncClient, grid_data, category):
    response = await client.post("/v1/maze/validate", json={"grid_data": grid_data})
    assert response.status_code == 200
    data = response.json()

    assert data["valid"] is False
    assert data["category"] == category
    assert data["error"]
