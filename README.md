# advent2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 19.
Each day lives in its own module, from `advent2024.day01` to `advent2024.day19`.
Each module takes the puzzle input as a string and returns the answer.
The package needs nothing outside the Python standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the modules

Every day module has a `part1(text)` function. Most have a `part2(text)`
function too. Both take the raw puzzle input:

```python
from pathlib import Path

from advent2024 import day01, day11

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))

print(day11.count_stones("125 17", 6))
```

Some days need the size of the puzzle area, because the example input and the
real input differ in size:

```python
from advent2024 import day14, day18

day14.part1(text, 103, 101)        # rows, columns
day18.part1(text, 71, 1024)        # grid size, number of fallen bytes
day18.part2(text, 71)              # "x,y" of the first byte that cuts off the exit
```

`day18.part1` and `day18.part2` default to a grid of size 71 and, for part 1,
to 1024 fallen bytes.

Some days also expose helpers that are useful on their own:

- `day02.is_safe` and `day02.is_safe_with_dampener` check a single report.
- `day05.OrderingGraph` parses page rules and has the methods `is_ordered` and `reorder`.
- `day07.Operator` and `day07.Equation` evaluate an equation and search for operators that make it true.
- `day09.Disk` parses a disk map and has the methods `compact_blocks`, `compact_files` and `checksum`.
- `day11.blink` transforms one stone.
- `day12.regions` lists the connected plant regions.
- `day13.Machine` finds the button presses for one claw machine and their price.
- `day14.split_axis` splits an axis into halves.
- `day17.run_program` runs the three-register machine.
- `day18.shortest_path` runs a breadth-first search on a grid.
- `day19.count_arrangements` counts the ways to build a design.

Malformed input raises `ValueError`. It does not return a wrong answer.
In day 6 part 1, a guard that walks in a loop raises `day06.GuardLoopError`.

## Command line

Installing the package adds an `advent2024` command. It takes the day, the
part and an input file:

```
advent2024 DAY PART [INPUT]
```

If `INPUT` is left out or given as `-`, the input is read from standard
input. The answer is printed. On the command line, day 14 uses a floor of 103
rows by 101 columns. Day 18 uses a grid of size 71 and 1024 fallen bytes.

## What the package does not do

- It has no solutions for days 20 to 25.
- It has only part 1 for days 13, 14, 16 and 17.
- It does not download puzzle inputs. You supply them as text or as a file.