# advent24

Solvers and small simulations for a set of Advent of Code 2024 puzzles.
Each day lives in its own module and comes with a command that reads a
puzzle input and prints the answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command                  | Puzzle                                                     |
|--------------------------|------------------------------------------------------------|
| `advent24-day01`         | Two location lists: total distance and similarity score    |
| `advent24-day11`         | Plutonian pebbles: counting stones after many blinks       |
| `advent24-day11-storage` | The same pebbles, kept generation by generation in SQLite  |
| `advent24-day12`         | Garden regions: fence prices by perimeter and by sides     |
| `advent24-day13`         | Claw machines: cheapest button presses to win prizes       |
| `advent24-day14`         | Restroom robots: motion, PNG frames and safety factor      |
| `advent24-day15`         | Warehouse robot pushing boxes and the GPS sum              |
| `advent24-day17`         | The three-bit computer and its program output              |

Every command takes `--help` to list its options. Most read the input
from `--file` or take it directly as text with `--input`.

A few commands write to disk:

- `advent24-day11-storage` keeps its stones in an SQLite file, by default
  `example.db` (change it with `--database`), and empties its `day_11`
  table before loading new stones.
- `advent24-day14` deletes the folder given by `--save-folder` (default
  `cmd/images`), creates it again and writes `render-<n>.png` frames
  into it.

`advent24-day13` solves exactly by default (`--method cramer`); `--method
search` walks the claw press by press. `--offset` is added to every prize
coordinate and defaults to 10000000000000.

`advent24-day17 --search` tries values of register A below `--limit` and
prints those whose first output equals `--first-output`.

## Using the modules

The commands are thin wrappers around functions you can call directly.

```python
from advent24.day01 import parse_lists, total_distance, similarity_score

left, right = parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(total_distance(left, right))
print(similarity_score(left, right))
```

```python
from advent24.day11 import parse_stones, count_stones

print(count_stones(parse_stones("125 17"), 25))
```

```python
from advent24.day17 import parse_computer

computer = parse_computer(
    "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"
)
computer.run()
print(computer.output_string())
```

Other entry points include `GenerationStore` and `StoredBlinker`
(`advent24.day11_storage`), `find_regions`, `total_cost` and
`total_discounted_cost` (`advent24.day12`), `parse_machines`,
`solve_by_search` and `solve_by_cramer` (`advent24.day13`),
`parse_guards` and `Floor` (`advent24.day14`), and `parse_warehouse` and
`Warehouse` (`advent24.day15`). Each parser has a matching `load_*`
function that reads the same input from a file path.

## What is not included

- There is no solver for the day 10 hiking-trail puzzle.
- There is no graphical window: answers are printed as text, and day 14
  writes PNG files.