import pytest

from fogmaze.constants import HIDDEN, PLAYER
from fogmaze.errors import MazeConfigError
from fogmaze.game import Session, create_level_session, create_session, create_session_from_settings
from fogmaze.levels import LEVELS, level_config, levels_in_tier
from fogmaze.maze import find_path_cells
from fogmaze.models import Maze, Settings
from fogmaze.movement import can_enter, step_target


def corridor(length: int = 7) -> Maze:
    return Maze.from_rows(["#" * length, "#" + " " * (length - 3) + "E#", "#" * length])


def visible(view) -> list:
    return [(x, y) for y, row in enumerate(view) for x, ch in enumerate(row) if ch != HIDDEN]


def test_closed_cell_rejects_every_direction() -> None:
    maze = Maze(rows=("###", "# #", "###"), start=(1, 1), exit=(1, 1))
    for direction in ("up", "down", "left", "right"):
        assert not can_enter(maze, *step_target(1, 1, direction))

    boxed = Session(maze)
    boxed.start()
    for direction in ("up", "down", "left", "right"):
        result = boxed.move(direction)
        assert not result.accepted
        assert result.position == (1, 1)
    assert boxed.position.as_tuple() == (1, 1)

    session = Session(Maze.from_rows(["#####", "# #E#", "#####"]))
    session.start()
    for direction in ("up", "down", "left", "right"):
        result = session.move(direction)
        assert not result.accepted
        assert result.position == (1, 1)
    assert session.position.as_tuple() == (1, 1)
    assert session.get_stats().steps == 0


def test_out_of_bounds_is_rejected() -> None:
    session = Session(Maze.from_rows(["  E"], start=(0, 0)))
    session.start()
    for direction in ("up", "down", "left"):
        assert not session.move(direction).accepted
    assert session.position.as_tuple() == (0, 0)
    assert session.move("right").accepted


def test_unknown_direction_raises() -> None:
    session = Session(corridor())
    session.start()
    with pytest.raises(ValueError):
        session.move("north")


def test_moves_before_start_are_rejected() -> None:
    session = Session(corridor())
    assert session.status == "not_started"
    assert not session.move("right").accepted
    assert session.start()
    assert not session.start()
    assert session.move("right").accepted


def test_win_is_terminal() -> None:
    session = Session(corridor(7))
    session.start()

    results = [session.move("right") for _ in range(4)]
    assert all(r.accepted for r in results)
    assert [r.won for r in results] == [False, False, False, True]
    assert session.status == "won"
    assert session.position.as_tuple() == session.maze.exit

    after = session.move("right")
    assert not after.accepted
    assert after.won
    assert after.position == (5, 1)
    assert not session.move("left").accepted
    assert session.get_stats().steps == 4


def test_reveals_are_ignored_before_start_and_after_win() -> None:
    session = Session(corridor(4), blind=True)
    assert not session.activate_flash()
    session.start()
    session.move("right")
    assert session.won
    assert not session.activate_god_eye()
    assert not session.activate_flash()
    stats = session.get_stats()
    assert (stats.flash_count, stats.god_eye_count) == (0, 0)


def test_full_view_before_start() -> None:
    session = Session(corridor(), blind=True)
    view = session.get_view()
    assert view == ("#######", "#@   E#", "#######")


def test_blind_view_shows_only_player_after_start() -> None:
    session = Session(corridor(), blind=True)
    session.start()
    assert visible(session.get_view()) == [(1, 1)]
    assert session.mode == "blind"


def test_god_eye_decays_after_one_move() -> None:
    session = Session(corridor(), blind=True)
    session.start()

    assert session.activate_god_eye()
    assert session.mode == "god_eye"
    assert HIDDEN not in "".join(session.get_view())

    assert session.move("right").accepted
    assert session.mode == "blind"
    assert visible(session.get_view()) == [(2, 1)]


def test_flash_decays_and_rejected_move_keeps_it() -> None:
    session = Session(corridor(), blind=True, flash_radius=2)
    session.start()
    session.activate_flash()

    assert not session.move("up").accepted
    assert session.mode == "flash"
    view = session.get_view()
    assert view[1][3] == " "
    assert view[1][4] == HIDDEN

    session.move("right")
    assert session.mode == "blind"


def test_reveals_override_each_other_and_count() -> None:
    session = Session(corridor(), blind=True)
    session.start()
    session.activate_flash()
    session.activate_god_eye()
    assert session.mode == "god_eye"
    session.activate_flash()
    session.activate_flash()
    assert session.mode == "flash"

    stats = session.get_stats()
    assert stats.flash_count == 3
    assert stats.god_eye_count == 1
    assert stats.to_dict() == {"steps": 0, "flash_count": 3, "god_eye_count": 1, "won": False}


def test_normal_mode_reverts_to_normal() -> None:
    session = Session(corridor(11))
    session.start()
    session.activate_god_eye()
    session.move("right")
    assert session.mode == "normal"
    view = session.get_view()
    assert view[1][2] == PLAYER
    assert view[1][6] == " "
    assert view[1][7] == HIDDEN


def test_stats_are_a_snapshot() -> None:
    session = Session(corridor())
    session.start()
    stats = session.get_stats()
    session.move("right")
    assert stats.steps == 0
    assert session.get_stats().steps == 1


def test_create_session_solves_along_shortest_path() -> None:
    session = create_session(20, "wilson", seed=99)
    assert session.maze.size == 21
    session.start()

    path = find_path_cells(session.maze.rows, session.maze.start, session.maze.exit)
    moves = {(1, 0): "right", (-1, 0): "left", (0, 1): "down", (0, -1): "up"}
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        assert session.move(moves[(x2 - x1, y2 - y1)]).accepted

    stats = session.get_stats()
    assert stats.won
    assert stats.steps == len(path) - 1


def test_sessions_do_not_share_state() -> None:
    a = create_session(15, "prim", seed=4)
    b = create_session(15, "prim", seed=4)
    assert a.maze == b.maze
    a.start()
    a.activate_flash()
    assert b.get_stats().flash_count == 0
    assert b.position is not a.position


def test_create_session_rejects_bad_config() -> None:
    with pytest.raises(MazeConfigError):
        create_session(0, "prim")
    with pytest.raises(MazeConfigError):
        create_session(21, "maze-o-matic")


def test_create_session_from_settings() -> None:
    settings = Settings(size=15, algorithm="division", seed=8, blind=True, radius=3.0)
    session = create_session_from_settings(settings)
    assert session.blind
    assert session.radius == 3.0
    assert session.maze.seed == 8
    assert session.maze.algorithm == "division"


def test_level_sessions_follow_table() -> None:
    session = create_level_session(12, seed="level twelve")
    cfg = level_config(12)
    assert session.maze.size == cfg.size
    assert session.maze.algorithm == cfg.algorithm
    assert session.blind


def test_level_table_tiers() -> None:
    assert sorted(LEVELS) == list(range(1, 16))
    assert [cfg.level for cfg in levels_in_tier("easy")] == [1, 2, 3, 4, 5]
    assert all(cfg.blind for cfg in levels_in_tier("hard"))
    with pytest.raises(MazeConfigError):
        level_config(16)
