import pytest

from advent24.day15 import (
    Direction,
    Entity,
    Kind,
    Warehouse,
    load_warehouse,
    main,
    next_position,
    parse_warehouse,
)

MAP = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########"""

MOVES = "<^^>>>vv<v>>v<<"

EXAMPLE = MAP + "\n\n" + MOVES + "\n"

FINAL = """########
#....OO#
##.....#
#.....O#
#.#O@..#
#...O..#
#...O..#
########"""


def _run_all(warehouse):
    for _ in range(warehouse.step_count):
        warehouse.update()


def test_parse_reads_moves_and_size():
    warehouse = parse_warehouse(EXAMPLE)
    assert warehouse.step_count == len(MOVES)
    assert "".join(str(d) for d in warehouse.directions) == MOVES
    assert warehouse.width == len(MAP.splitlines()[0])
    assert warehouse.height == len(MAP.splitlines())


def test_render_round_trips_the_map():
    assert parse_warehouse(EXAMPLE).render() == MAP


def test_render_round_trips_with_crlf():
    crlf = EXAMPLE.replace("\n", "\r\n")
    assert parse_warehouse(crlf).render() == MAP


def test_robot_position_comes_from_map():
    warehouse = parse_warehouse(EXAMPLE)
    row = next(i for i, line in enumerate(MAP.splitlines()) if "@" in line)
    column = MAP.splitlines()[row].index("@")
    assert warehouse.guard.position == (column, row)
    assert warehouse.guard.kind is Kind.GUARD


def test_example_final_state_and_sum():
    warehouse = parse_warehouse(EXAMPLE)
    _run_all(warehouse)
    assert warehouse.render() == FINAL
    assert warehouse.gps_sum() == 2028


def test_walls_and_boxes_are_preserved():
    warehouse = parse_warehouse(EXAMPLE)
    walls = {e.position for e in warehouse.entities if e.is_wall}
    boxes = sum(1 for e in warehouse.entities if e.is_food)
    _run_all(warehouse)
    assert {e.position for e in warehouse.entities if e.is_wall} == walls
    assert sum(1 for e in warehouse.entities if e.is_food) == boxes
    assert warehouse.render().count("O") == boxes


def test_moves_wrap_after_last():
    warehouse = parse_warehouse(EXAMPLE)
    _run_all(warehouse)
    assert warehouse.current_direction == 0


def test_box_against_wall_does_not_move():
    text = "#####\n#@O#.\n#####\n\n>\n"
    warehouse = parse_warehouse(text)
    before = warehouse.render()
    warehouse.update()
    assert warehouse.render() == before


def test_robot_pushes_row_of_boxes():
    warehouse = parse_warehouse("#######\n#@OO..#\n#######\n\n>\n")
    warehouse.update()
    assert warehouse.render() == "#######\n#.@OO.#\n#######"


def test_attempt_move_reports_wall():
    warehouse = parse_warehouse("###\n#@#\n###\n\n^\n")
    assert warehouse.attempt_move(warehouse.guard.position, Direction.UP) is False
    warehouse.update()
    assert warehouse.render() == "###\n#@#\n###"


def test_gps_sum_of_single_box():
    warehouse = Warehouse([Entity(4, 1, Kind.FOOD)], [], 7, 3)
    assert warehouse.gps_sum() == 104


def test_entity_at_empty_cell():
    warehouse = parse_warehouse(EXAMPLE)
    assert warehouse.entity_at(1, 1) is None
    assert warehouse.entity_at(0, 0).is_wall


@pytest.mark.parametrize("direction", list(Direction))
def test_next_position_opposites_cancel(direction):
    opposite = {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }[direction]
    start = (3, 4)
    moved = next_position(start, direction)
    assert moved != start
    assert next_position(moved, opposite) == start


def test_update_without_moves_raises():
    with pytest.raises(ValueError):
        parse_warehouse(MAP + "\n\n").update()


def test_update_without_robot_raises():
    with pytest.raises(ValueError):
        parse_warehouse("####\n#O.#\n####\n\n<\n").update()


def test_load_warehouse_matches_parse(tmp_path):
    path = tmp_path / "warehouse.txt"
    path.write_text(EXAMPLE)
    assert load_warehouse(path).render() == parse_warehouse(EXAMPLE).render()


def test_main_prints_sum(tmp_path, capsys):
    path = tmp_path / "warehouse.txt"
    path.write_text(EXAMPLE)
    assert main(["--file", str(path)]) == 0
    assert capsys.readouterr().out == "2028\n"


def test_main_with_zero_steps_runs_every_move(capsys):
    assert main(["--input", EXAMPLE, "--steps", "0"]) == 0
    assert capsys.readouterr().out == "2028\n"


def test_main_reports_missing_file(tmp_path):
    assert main(["--file", str(tmp_path / "missing.txt")]) == 1