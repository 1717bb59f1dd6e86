"""Solutions to short string puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from string import ascii_lowercase

_KEYBOARD = "qwertyuiopasdfghjkl;zxcvbnm,./"


def game_winner(results: str) -> str:
    """Name who won more games: 'A' marks Anton's wins, anything else Danik's."""
    anton = results.count("A")
    danik = len(results) - anton
    if anton > danik:
        return "Anton"
    if danik > anton:
        return "Danik"
    return "Friendship"


def count_distinct_letters(line: str) -> int:
    """Count the different ASCII letters in a set written like '{a, b, c}'."""
    return len({ch for ch in line if ch.isascii() and ch.isalpha()})


def gender_by_username(name: str) -> str:
    """Guess the user's gender from the parity of distinct characters in the name."""
    if len(set(name)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def final_stone_position(stones: str, instructions: str) -> int:
    """Return the 1-based stone Liss stands on after following the instructions.

    She moves one stone forward whenever the instruction matches the colour
    of the stone she is on.
    """
    position = 0
    for colour in instructions:
        if position < len(stones) and stones[position] == colour:
            position += 1
    return position + 1


def sort_summands(expression: str) -> str:
    """Sort the summands of a sum like '3+2+1' into non-decreasing order."""
    chars = list(expression)
    chars[::2] = sorted(chars[::2])
    return "".join(chars)


def fix_keyboard_shift(direction: str, text: str) -> str:
    """Recover text typed with hands shifted one key left ('L') or right ('R')."""
    if direction not in ("L", "R"):
        raise ValueError(f"direction must be 'L' or 'R', not {direction!r}")
    offset = -1 if direction == "R" else 1
    recovered = []
    for ch in text:
        index = _KEYBOARD.find(ch)
        if index < 0:
            raise ValueError(f"character {ch!r} is not on the keyboard")
        target = index + offset
        if not 0 <= target < len(_KEYBOARD):
            raise ValueError(f"character {ch!r} cannot be shifted {direction}")
        recovered.append(_KEYBOARD[target])
    return "".join(recovered)


def longest_uncommon_subsequence(first: str, second: str) -> int:
    """Length of the longest subsequence of one string that is not in the other, or -1."""
    if first == second:
        return -1
    return max(len(first), len(second))


def make_password(length: int, distinct: int) -> str:
    """Build a password of the given length using exactly `distinct` letters, no repeats adjacent."""
    if not 1 <= distinct <= len(ascii_lowercase):
        raise ValueError("distinct must be between 1 and 26")
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(ascii_lowercase[i % distinct] for i in range(length))


def wheel_rotations(word: str) -> int:
    """Minimum wheel rotations to print the word, starting at 'a'."""
    total = 0
    current = "a"
    for ch in word:
        step = abs(ord(ch) - ord(current))
        total += min(step, 26 - step)
        current = ch
    return total


def is_pangram(text: str) -> bool:
    """Tell whether the text holds every Latin letter, ignoring case."""
    return set(ascii_lowercase) <= set(text.lower())


def compare_ignoring_case(first: str, second: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1."""
    a, b = first.lower(), second.lower()
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def stones_to_remove(colors: str) -> int:
    """Count stones to take away so no two neighbouring stones share a colour."""
    return sum(a == b for a, b in zip(colors, colors[1:]))


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters as first letter, count, last letter."""
    if len(word) <= 10:
        return word
    return f"{word[0]}{len(word) - 2}{word[-1]}"


def fix_word_case(word: str) -> str:
    """Lower-case the word unless it holds strictly more upper-case letters."""
    lower = sum(ch >= "a" for ch in word)
    upper = len(word) - lower
    return word.lower() if lower >= upper else word.upper()


def count_magnet_groups(magnets: Iterable[str]) -> int:
    """Count groups formed by magnets laid in a row ('01' or '10' each)."""
    row: Sequence[str] = list(magnets)
    if not row:
        return 0
    return 1 + sum(current[1] == previous[0] for previous, current in zip(row, row[1:]))