# judgebox

Short programming-contest exercises, written as ordinary Python functions
that take Python values and return Python values. They cover string puzzles,
counting problems, simple simulations and a date-based meter-reading task.
There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `judgebox.strings` has the text puzzles: `game_winner`, `count_distinct_letters`,
  `gender_by_username`, `final_stone_position`, `sort_summands`,
  `fix_keyboard_shift`, `longest_uncommon_subsequence`, `make_password`,
  `wheel_rotations`, `is_pangram`, `compare_ignoring_case`,
  `stones_to_remove`, `abbreviate`, `fix_word_case` and `count_magnet_groups`.
- `judgebox.arithmetic` has the number problems: `years_to_outgrow`,
  `calories_wasted`, `count_white_corner_boards`, `shovels_to_buy`,
  `second_oven_helps`, `win_probability`, `is_light_on`, `road_width`,
  `problems_to_solve`, `multiply_digits`, `is_good_generator` and
  `format_generator_report`.
- `judgebox.sequences` has the list problems: `moves_to_center`,
  `serve_ice_cream`, `count_host_uniform_games`, `flip_gravity`,
  `horseshoes_to_buy`, `count_waste_emptyings`, `mail_costs`,
  `stewards_supported`, `untreated_crimes`, `gift_givers`, `play_cards`,
  `shoot_birds`, `build_snacktower`, `form_teams` and `coins_to_take`.
- `judgebox.electricity` handles meter readings. It provides the frozen
  `Reading` dataclass (`day`, `month`, `year`, `consumption`) with
  `Reading.follows(other)`, and also `is_leap_year`, `days_in_month` and
  `daily_consumption`. `daily_consumption` returns how many readings were
  taken the day after the one before them, and the consumption summed over
  those pairs.

```python
from judgebox.strings import abbreviate
from judgebox.arithmetic import win_probability

abbreviate("localization")   # 'l10n'
abbreviate("word")           # 'word'
win_probability(4, 2)        # '1/2'
```

Functions raise `ValueError` for input they cannot handle. Examples are
an unknown keyboard character, a matrix that is not 5x5, or receivers that
are not a permutation of 1..n.

## Command line

The `judgebox` command solves the problems whose input holds many test
cases. It reads the input from standard input and prints one answer line
per case:

| problem       | input until                | answer per case                        |
|---------------|----------------------------|----------------------------------------|
| `painting`    | a line starting with `0`   | number of boards with a white corner   |
| `light`       | `0`                        | `yes` or `no`                          |
| `product`     | end of input               | product of two decimal numbers         |
| `generator`   | end of input               | step, modulus and the verdict          |
| `electricity` | a count of `0`             | consecutive days and their consumption |

```
printf '3\n6241\n8191\n0\n' | judgebox light
judgebox --help
```

If the input is malformed, the command prints `judgebox: <reason>` to
standard error and exits with status 1.

From Python, `judgebox.cli.run(problem, text)` takes the problem name and
the input as a string and returns the output text. `judgebox.cli.main(argv)`
is the command's entry point.

## What it does not do

The command line covers only the five multi-case problems above. All the
other solutions are available only as Python functions. No command reads
their input or prints their answers.