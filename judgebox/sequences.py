"""Solutions to puzzles over short sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_CENTER = 2
_MATRIX_SIZE = 5


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Fewest adjacent row or column swaps that bring the single 1 to the centre of a 5x5 matrix."""
    if len(matrix) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in matrix):
        raise ValueError("matrix must be 5x5")
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 1:
                return abs(r - _CENTER) + abs(c - _CENTER)
    raise ValueError("matrix holds no 1")


def serve_ice_cream(stock: int, queue: Iterable[tuple[str, int]]) -> tuple[int, int]:
    """Process carriers ('+') and kids ('-'); return packs left and distressed kids."""
    distressed = 0
    for sign, amount in queue:
        if sign == "+":
            stock += amount
        elif sign == "-":
            if stock >= amount:
                stock -= amount
            else:
                distressed += 1
        else:
            raise ValueError(f"unknown queue sign {sign!r}")
    return stock, distressed


def count_host_uniform_games(teams: Sequence[tuple[int, int]]) -> int:
    """Count games where the host plays in its guest uniform (home colour equals guest's away colour)."""
    return sum(home == away for home, _ in teams for _, away in teams)


def flip_gravity(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity is switched to pull to the right."""
    return sorted(columns)


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Horseshoes to buy so that all of them have different colours."""
    return len(colors) - len(set(colors))


def count_waste_emptyings(oranges: Iterable[int], max_size: int, waste_limit: int) -> int:
    """Times the juicer's waste section is emptied.

    Oranges larger than `max_size` are thrown away; the waste is emptied
    whenever its total exceeds `waste_limit`.
    """
    emptyings = 0
    waste = 0
    for orange in oranges:
        if orange > max_size:
            continue
        waste += orange
        if waste > waste_limit:
            emptyings += 1
            waste = 0
    return emptyings


def mail_costs(cities: Sequence[int]) -> list[tuple[int, int]]:
    """For each city on a line (sorted coordinates), the cheapest and dearest letter cost."""
    if len(cities) < 2:
        raise ValueError("at least two cities are required")
    first, last = cities[0], cities[-1]
    costs = []
    for i, x in enumerate(cities):
        neighbours = []
        if i > 0:
            neighbours.append(abs(x - cities[i - 1]))
        if i < len(cities) - 1:
            neighbours.append(abs(x - cities[i + 1]))
        costs.append((min(neighbours), max(abs(x - first), abs(x - last))))
    return costs


def stewards_supported(strengths: Sequence[int]) -> int:
    """Count stewards with someone strictly weaker and someone strictly stronger."""
    if not strengths:
        return 0
    low, high = min(strengths), max(strengths)
    return sum(low < s < high for s in strengths)


def untreated_crimes(events: Iterable[int]) -> int:
    """Count crimes (negative events) that happen while no officer is free.

    Positive events hire that many officers.
    """
    officers = 0
    untreated = 0
    for event in events:
        if event >= 0:
            officers += event
        elif officers == 0:
            untreated += -event
        else:
            officers -= -event
    return untreated


def gift_givers(receivers: Sequence[int]) -> list[int]:
    """Given whom each friend gave a gift to, return who gave a gift to each friend."""
    n = len(receivers)
    if sorted(receivers) != list(range(1, n + 1)):
        raise ValueError("receivers must be a permutation of 1..n")
    givers = [0] * n
    for giver, receiver in enumerate(receivers, start=1):
        givers[receiver - 1] = giver
    return givers


def play_cards(cards: Sequence[int]) -> tuple[int, int]:
    """Sereja and Dima greedily take the larger end card in turn; return their totals."""
    left, right = 0, len(cards) - 1
    scores = [0, 0]
    turn = 0
    while left <= right:
        if cards[left] >= cards[right]:
            taken = cards[left]
            left += 1
        else:
            taken = cards[right]
            right -= 1
        scores[turn] += taken
        turn ^= 1
    return scores[0], scores[1]


def shoot_birds(wires: Sequence[int], shots: Iterable[tuple[int, int]]) -> list[int]:
    """Bird counts on each wire after the shots.

    A shot at (wire, position) kills that bird; birds to its left jump to the
    wire above, birds to its right to the wire below, or fly away if there is none.
    """
    birds = list(wires)
    for wire, position in shots:
        if not 1 <= wire <= len(birds):
            raise ValueError(f"no wire {wire}")
        index = wire - 1
        if not 1 <= position <= birds[index]:
            raise ValueError(f"no bird at position {position} on wire {wire}")
        if index > 0:
            birds[index - 1] += position - 1
        if index < len(birds) - 1:
            birds[index + 1] += birds[index] - position
        birds[index] = 0
    return birds


def build_snacktower(snacks: Sequence[int]) -> list[list[int]]:
    """Snacks placed on the tower each day, largest first; sizes fall one per day from 1..n."""
    n = len(snacks)
    if sorted(snacks) != list(range(1, n + 1)):
        raise ValueError("snacks must be a permutation of 1..n")
    fallen = set()
    next_size = n
    days = []
    for size in snacks:
        fallen.add(size)
        placed = []
        while next_size in fallen:
            placed.append(next_size)
            next_size -= 1
        days.append(placed)
    return days


def form_teams(skills: Sequence[int]) -> list[tuple[int, int, int]]:
    """Form as many teams as possible of one programmer, mathematician and athlete (1-based indices)."""
    groups: dict[int, list[int]] = {1: [], 2: [], 3: []}
    for index, skill in enumerate(skills, start=1):
        if skill not in groups:
            raise ValueError(f"skill must be 1, 2 or 3, not {skill!r}")
        groups[skill].append(index)
    return list(zip(groups[1], groups[2], groups[3]))


def coins_to_take(coins: Iterable[int]) -> int:
    """Fewest coins whose sum is strictly greater than the sum of those left."""
    ordered = sorted(coins, reverse=True)
    total = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        if taken > total - taken:
            return count
    raise ValueError("no choice of coins beats the rest")