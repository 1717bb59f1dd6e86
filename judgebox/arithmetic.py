"""Solutions to short arithmetic puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from fractions import Fraction


def years_to_outgrow(limak: int, bob: int) -> int:
    """Years until Limak (tripling yearly) is heavier than Bob (doubling yearly)."""
    if limak == bob:
        return 1
    years = 0
    while limak <= bob:
        limak *= 3
        bob *= 2
        years += 1
    return years


def calories_wasted(costs: Sequence[int], strips: str) -> int:
    """Total calories for touching strips '1'..'4', each with its own cost."""
    if len(costs) != 4:
        raise ValueError("exactly four strip costs are required")
    by_strip = dict(zip("1234", costs))
    return sum(by_strip.get(ch, 0) for ch in strips)


def count_white_corner_boards(rows: int, columns: int, corner_white: bool) -> int:
    """Count 8x8 chessboards (white bottom-right corner) inside a painted board."""
    value = (rows - 7) * (columns - 7) + (1 if corner_white else 0)
    return value // 2 if value >= 0 else -((-value) // 2)


def shovels_to_buy(price: int, coin: int) -> int:
    """Fewest shovels payable with ten-burle coins plus at most one `coin`-burle coin."""
    for count in range(1, 11):
        if (count * price) % 10 in (0, coin):
            return count
    raise AssertionError("ten shovels always cost a multiple of ten")


def second_oven_helps(cakes: int, bake_time: int, per_batch: int, build_time: int) -> bool:
    """Tell whether building a second oven gets the cakes baked sooner."""
    one_oven = -(-cakes // per_batch) * bake_time
    return one_oven > build_time + bake_time


def win_probability(yakko: int, wakko: int) -> str:
    """Dot's chance of winning a die roll, as an irreducible 'a/b'."""
    if not (1 <= yakko <= 6 and 1 <= wakko <= 6):
        raise ValueError("die results must be between 1 and 6")
    chance = Fraction(7 - max(yakko, wakko), 6)
    return f"{chance.numerator}/{chance.denominator}"


def is_light_on(bulb: int) -> bool:
    """The last bulb is lit exactly when its number is a perfect square."""
    if bulb < 0:
        raise ValueError("bulb number must not be negative")
    root = math.isqrt(bulb)
    return root * root == bulb


def road_width(fence_height: int, heights: Iterable[int]) -> int:
    """Road width needed: tall friends bend down and take two units."""
    return sum(1 if h <= fence_height else 2 for h in heights)


def problems_to_solve(confidences: Iterable[Sequence[int]]) -> int:
    """Count problems at least two of the three friends are sure about."""
    return sum(sum(votes) >= 2 for votes in confidences)


def _check_digits(number: str) -> None:
    if not number or not (number.isascii() and number.isdigit()):
        raise ValueError(f"not a decimal number: {number!r}")


def multiply_digits(first: str, second: str) -> str:
    """Multiply two non-negative integers written in decimal."""
    _check_digits(first)
    _check_digits(second)
    return str(int(first) * int(second))


def is_good_generator(step: int, modulus: int) -> bool:
    """Tell whether seed = (seed + step) % modulus visits every value below modulus."""
    if modulus <= 0:
        return True
    visited = {(step * i) % modulus for i in range(1, modulus + 1)}
    return all(value in visited for value in range(1, modulus))


def format_generator_report(step: int, modulus: int) -> str:
    """One report line: step and modulus right-aligned in ten columns, then the verdict."""
    verdict = "good choice" if is_good_generator(step, modulus) else "bad Choice"
    return f"{step:>10}{modulus:>10}    {verdict}"