"""Command-line runner for the puzzles that read many test cases from one input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from judgebox.arithmetic import (
    count_white_corner_boards,
    format_generator_report,
    is_light_on,
    multiply_digits,
)
from judgebox.electricity import Reading, daily_consumption


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def _painting(tokens: Iterator[str]) -> Iterator[str]:
    for rows in tokens:
        try:
            rows_value = int(rows)
        except ValueError:
            raise ValueError(f"expected an integer for rows, got {rows!r}") from None
        if rows_value == 0:
            return
        columns = _next_int(tokens, "columns")
        corner = _next_int(tokens, "corner colour")
        yield str(count_white_corner_boards(rows_value, columns, corner == 1))


def _light(tokens: Iterator[str]) -> Iterator[str]:
    for token in tokens:
        try:
            bulb = int(token)
        except ValueError:
            raise ValueError(f"expected an integer bulb number, got {token!r}") from None
        if bulb == 0:
            return
        yield "yes" if is_light_on(bulb) else "no"


def _product(tokens: Iterator[str]) -> Iterator[str]:
    for first in tokens:
        second = _next_token(tokens, "second factor")
        yield multiply_digits(first, second)


def _generator(tokens: Iterator[str]) -> Iterator[str]:
    for token in tokens:
        try:
            step = int(token)
        except ValueError:
            raise ValueError(f"expected an integer step, got {token!r}") from None
        modulus = _next_int(tokens, "modulus")
        yield format_generator_report(step, modulus)


def _electricity(tokens: Iterator[str]) -> Iterator[str]:
    for token in tokens:
        try:
            count = int(token)
        except ValueError:
            raise ValueError(f"expected a reading count, got {token!r}") from None
        if count == 0:
            return
        readings = [
            Reading(
                day=_next_int(tokens, "day"),
                month=_next_int(tokens, "month"),
                year=_next_int(tokens, "year"),
                consumption=_next_int(tokens, "consumption"),
            )
            for _ in range(count)
        ]
        days, total = daily_consumption(readings)
        yield f"{days} {total}"


_PROBLEMS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "painting": _painting,
    "light": _light,
    "product": _product,
    "generator": _generator,
    "electricity": _electricity,
}


def run(problem: str, text: str) -> str:
    """Solve every case of `problem` found in `text`; one output line per case."""
    try:
        solver = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return "".join(f"{line}\n" for line in solver(iter(text.split())))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="judgebox", description="Solve multi-case puzzles read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"judgebox: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0