"""Tests for the in-memory session store."""

import pytest

from maze_game.core.maze_engine import Direction
from maze_game.core.maze_parser import parse_maze_text
from maze_game.services.session_store import SessionStore


SIMPLE_MAZE = """#####
#S  #
# # #
#  E#
#####"""


@pytest.fixture
def store() -> SessionStore:
    return SessionStore(max_sessions=3)


def _new(store: SessionStore):
    return store.create(parse_maze_text(SIMPLE_MAZE), "upload")


def test_create_and_get(store):
    session = _new(store)

    assert session.session_id.startswith("sess_")
    assert store.get(session.session_id) is session
    assert len(store) == 1


def test_remove(store):
    session = _new(store)

    assert store.remove(session.session_id) is True
    assert store.remove(session.session_id) is False
    assert store.get(session.session_id) is None


def test_finished_sessions_are_evicted_first(store):
    oldest = _new(store)
    quitter = _new(store)
    winner = _new(store)

    quitter.controller.quit()
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.DOWN):
        winner.controller.move(direction)
    assert winner.controller.finished

    newest = _new(store)

    assert len(store) == 2
    assert store.get(oldest.session_id) is oldest
    assert store.get(newest.session_id) is newest
    assert store.get(quitter.session_id) is None
    assert store.get(winner.session_id) is None


def test_oldest_active_session_is_evicted_when_full(store):
    sessions = [_new(store) for _ in range(3)]

    newest = _new(store)

    assert len(store) == 3
    assert store.get(sessions[0].session_id) is None
    assert store.get(sessions[1].session_id) is sessions[1]
    assert store.get(newest.session_id) is newest
