import pytest

from judgebox.arithmetic import (
    calories_wasted,
    count_white_corner_boards,
    format_generator_report,
    is_good_generator,
    is_light_on,
    multiply_digits,
    problems_to_solve,
    road_width,
    second_oven_helps,
    shovels_to_buy,
    win_probability,
    years_to_outgrow,
)


@pytest.mark.parametrize("limak, bob", [(4, 7), (4, 9), (1, 10), (2, 3)])
def test_years_to_outgrow_is_first_year_heavier(limak, bob):
    years = years_to_outgrow(limak, bob)
    assert limak * 3**years > bob * 2**years
    assert limak * 3 ** (years - 1) <= bob * 2 ** (years - 1)


def test_years_to_outgrow_equal_weights():
    assert years_to_outgrow(1, 1) == 1


def test_calories_wasted_counts_each_strip():
    assert calories_wasted([1, 0, 0, 0], "11221") == "11221".count("1")
    assert calories_wasted([0, 0, 0, 5], "44x4") == 5 * "44x4".count("4")


def test_calories_wasted_needs_four_costs():
    with pytest.raises(ValueError):
        calories_wasted([1, 2, 3], "123")


@pytest.mark.parametrize("rows, columns", [(8, 8), (8, 9), (9, 9), (10, 13)])
def test_count_white_corner_boards_splits_all_boards(rows, columns):
    white = count_white_corner_boards(rows, columns, True)
    black = count_white_corner_boards(rows, columns, False)
    assert white + black == (rows - 7) * (columns - 7)
    assert white - black in (0, 1)


@pytest.mark.parametrize("price, coin", [(117, 3), (237, 7), (15, 2), (7, 1)])
def test_shovels_to_buy_is_smallest_payable(price, coin):
    count = shovels_to_buy(price, coin)
    assert 1 <= count <= 10
    assert (count * price) % 10 in (0, coin)
    assert all((k * price) % 10 not in (0, coin) for k in range(1, count))


def test_second_oven_helps():
    assert second_oven_helps(8, 6, 4, 5)
    assert not second_oven_helps(8, 6, 4, 6)
    assert not second_oven_helps(10, 3, 11, 4)
    assert second_oven_helps(4, 2, 1, 4)


def test_win_probability():
    assert win_probability(4, 2) == "1/2"
    assert win_probability(1, 1) == "1/1"


def test_win_probability_is_reduced_and_symmetric():
    for a in range(1, 7):
        for b in range(1, 7):
            result = win_probability(a, b)
            assert result == win_probability(b, a)
            numerator, denominator = map(int, result.split("/"))
            assert numerator <= denominator


def test_win_probability_rejects_bad_die():
    with pytest.raises(ValueError):
        win_probability(7, 1)


def test_is_light_on():
    assert not is_light_on(3)
    assert is_light_on(6241)
    assert not is_light_on(8191)


def test_is_light_on_rejects_negative():
    with pytest.raises(ValueError):
        is_light_on(-4)


def test_road_width():
    heights = [4, 5, 14]
    width = road_width(7, heights)
    assert width == 4
    assert len(heights) <= width <= 2 * len(heights)
    assert road_width(100, heights) == len(heights)


def test_problems_to_solve():
    sure = [(1, 1, 1), (1, 1, 0), (0, 1, 1)]
    assert problems_to_solve(sure) == len(sure)
    assert problems_to_solve([(1, 0, 0), (0, 0, 0)]) == problems_to_solve([])


@pytest.mark.parametrize(
    "first, second", [("12", "12"), ("0", "123"), ("99999999999999999999", "88888888888888")]
)
def test_multiply_digits_matches_integers(first, second):
    result = multiply_digits(first, second)
    assert int(result) == int(first) * int(second)
    assert result == "0" or not result.startswith("0")


@pytest.mark.parametrize("bad", ["12a", "", "-3", "1 2"])
def test_multiply_digits_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        multiply_digits(bad, "5")


def test_is_good_generator():
    assert is_good_generator(3, 5)
    assert not is_good_generator(15, 20)
    assert is_good_generator(63923, 99999)


def test_format_generator_report():
    good = format_generator_report(3, 5)
    assert good.endswith("good choice")
    assert good[:10].strip() == "3"
    assert good[10:20].strip() == "5"
    bad = format_generator_report(15, 20)
    assert bad.endswith("bad Choice")
    assert bad[20:24] == "    "