import pytest

from algobox.optimization import (
    Project,
    edit_distance,
    max_pages,
    max_project_reward,
    min_coins,
    min_jumps,
    optimal_sequence,
    rectangle_cuts,
    removal_game,
    removing_digits,
)


def test_min_coins_zero_target():
    assert min_coins([3, 5], 0) == 0


@pytest.mark.parametrize("target", [4, 12, 40])
def test_min_coins_single_coin(target):
    assert min_coins([4], target) == target // 4


def test_min_coins_unreachable():
    assert min_coins([4, 6], 7) is None


@pytest.mark.parametrize("target", [1, 7, 23, 58])
def test_min_coins_more_coins_never_worse(target):
    assert min_coins([1, 3, 4, 10], target) <= min_coins([1, 3], target)


def test_min_coins_invalid():
    with pytest.raises(ValueError):
        min_coins([0, 2], 4)
    with pytest.raises(ValueError):
        min_coins([1], -2)


@pytest.mark.parametrize("n", [1, 2, 5, 9])
def test_min_jumps_all_ones(n):
    assert min_jumps([1] * n) == n - 1


def test_min_jumps_no_start():
    assert min_jumps([]) is None
    assert min_jumps([0, 3, 1]) is None


def test_min_jumps_unreachable():
    assert min_jumps([1, 0, 1]) is None


def test_min_jumps_big_first_step():
    assert min_jumps([10, 0, 0, 0, 0]) == 1


def test_max_pages_example():
    assert max_pages([4, 8, 5, 3], [5, 12, 8, 1], 10) == 13


def test_max_pages_zero_budget():
    assert max_pages([1, 2], [10, 20], 0) == 0


def test_max_pages_budget_covers_all():
    prices, pages = [3, 1, 4], [7, 2, 9]
    assert max_pages(prices, pages, sum(prices)) == sum(pages)


def test_max_pages_invalid():
    with pytest.raises(ValueError):
        max_pages([1, 2], [3], 5)
    with pytest.raises(ValueError):
        max_pages([-1], [3], 5)


def test_edit_distance_example():
    assert edit_distance("LOVE", "MOVIE") == 2


@pytest.mark.parametrize("word", ["", "a", "kitten"])
def test_edit_distance_identity(word):
    assert edit_distance(word, word) == 0


def test_edit_distance_from_empty():
    assert edit_distance("", "abcd") == len("abcd")
    assert edit_distance("xyz", "") == len("xyz")


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("flaw", "lawn"), ("ab", "ba")])
def test_edit_distance_bounds(a, b):
    distance = edit_distance(a, b)
    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


def test_rectangle_cuts_example():
    assert rectangle_cuts(3, 5) == 3


@pytest.mark.parametrize("size", [1, 4, 9])
def test_rectangle_cuts_square(size):
    assert rectangle_cuts(size, size) == 0


@pytest.mark.parametrize("k", [1, 2, 6])
def test_rectangle_cuts_strip(k):
    assert rectangle_cuts(1, k) == k - 1


@pytest.mark.parametrize("w,h", [(2, 7), (4, 6), (5, 8)])
def test_rectangle_cuts_symmetric(w, h):
    assert rectangle_cuts(w, h) == rectangle_cuts(h, w)


def test_rectangle_cuts_invalid():
    with pytest.raises(ValueError):
        rectangle_cuts(0, 3)


def test_removal_game_small():
    assert removal_game([]) == 0
    assert removal_game([7]) == 7
    assert removal_game([3, 9]) == 9


@pytest.mark.parametrize("values", [[4, 5, 1, 3], [2, 8, 1, 1, 6, 3], [5, 5, 5, 5]])
def test_removal_game_even_length_at_least_half(values):
    score = removal_game(values)
    assert 2 * score >= sum(values)
    assert score <= sum(values)


@pytest.mark.parametrize("n", range(1, 10))
def test_removing_digits_single_digit(n):
    assert removing_digits(n) == 1


@pytest.mark.parametrize("n", [10, 27, 100, 999])
def test_removing_digits_bounds(n):
    steps = removing_digits(n)
    assert -(-n // 9) <= steps <= n


def test_removing_digits_zero_and_negative():
    assert removing_digits(0) == 0
    with pytest.raises(ValueError):
        removing_digits(-1)


def test_projects_empty_and_single():
    assert max_project_reward([]) == 0
    assert max_project_reward([Project(1, 5, 12)]) == 12


def test_projects_touching_overlap():
    projects = [Project(1, 2, 4), Project(2, 3, 6)]
    assert max_project_reward(projects) == 6


def test_projects_disjoint_sum():
    projects = [Project(5, 6, 3), Project(1, 2, 4), Project(3, 4, 6)]
    assert max_project_reward(projects) == 3 + 4 + 6


@pytest.mark.parametrize("n", [1, 2, 10, 96234])
def test_optimal_sequence_steps(n):
    sequence = optimal_sequence(n)
    assert sequence[0] == 1
    assert sequence[-1] == n
    for a, b in zip(sequence, sequence[1:]):
        assert b in (a + 1, 2 * a, 3 * a)


def test_optimal_sequence_non_positive():
    assert optimal_sequence(0) == []
    assert optimal_sequence(1) == [1]