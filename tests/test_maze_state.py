"""Tests for MazeState helpers and the render model."""

from maze_game.core.maze_state import CellType, MazeState, Position


def test_render_overlays_markers(simple_maze):
    assert simple_maze.render() == [
        "#####",
        "#X  #",
        "# # #",
        "#  E#",
        "#####",
    ]


def test_render_shows_start_after_player_leaves(simple_maze):
    simple_maze.player_position = Position(2, 1)

    rows = simple_maze.render()

    assert rows[1] == "#SX #"


def test_player_drawn_over_exit(simple_maze):
    simple_maze.player_position = simple_maze.exit_position

    rows = simple_maze.render()

    assert rows[3] == "#  X#"
    assert "E" not in simple_maze.to_text()


def test_out_of_bounds_reads_as_wall(simple_maze):
    assert simple_maze.cell(Position(-1, 0)) == CellType.WALL
    assert simple_maze.cell(Position(5, 5)) == CellType.WALL
    assert not simple_maze.in_bounds(Position(5, 0))


def test_reachable_from(simple_maze):
    reachable = simple_maze.reachable_from(Position(1, 1))

    assert Position(3, 3) in reachable
    assert Position(2, 2) not in reachable
    assert len(reachable) == 8


def test_start_position_defaults_to_player():
    state = MazeState(
        height=1,
        width=2,
        grid=[[CellType.PATH, CellType.PATH]],
        player_position=Position(0, 0),
        exit_position=Position(1, 0),
    )

    assert state.start_position == Position(0, 0)
    assert state.is_solvable()


def test_to_dict(simple_maze):
    d = simple_maze.to_dict()

    assert d["width"] == 5
    assert d["height"] == 5
    assert d["player_position"] == {"x": 1, "y": 1}
    assert d["exit_position"] == {"x": 3, "y": 3}
