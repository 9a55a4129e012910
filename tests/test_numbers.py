import pytest

from algobox.numbers import (
    binomial,
    catalan,
    equal_without_compare,
    hanoi_moves,
    primes_up_to,
)


def test_first_ten_catalan_numbers():
    assert [catalan(i) for i in range(10)] == [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]


@pytest.mark.parametrize("n", range(1, 15))
def test_catalan_recurrence(n):
    assert catalan(n) == sum(catalan(i) * catalan(n - 1 - i) for i in range(n))


@pytest.mark.parametrize("n", range(0, 20))
def test_binomial_symmetry_and_pascal(n):
    for k in range(n + 1):
        assert binomial(n, k) == binomial(n, n - k)
        if 0 < k < n:
            assert binomial(n, k) == binomial(n - 1, k - 1) + binomial(n - 1, k)


@pytest.mark.parametrize("n", range(0, 12))
def test_binomial_row_sums_to_power_of_two(n):
    assert sum(binomial(n, k) for k in range(n + 1)) == 2**n


def test_binomial_k_above_n_is_zero():
    assert binomial(5, 7) == 0


def test_binomial_negative_raises():
    with pytest.raises(ValueError):
        binomial(-1, 0)


def test_catalan_negative_raises():
    with pytest.raises(ValueError):
        catalan(-3)


def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [0, 1])
def test_no_primes_below_two(n):
    assert primes_up_to(n) == []


def test_primes_are_exactly_the_numbers_without_divisors():
    limit = 200
    primes = set(primes_up_to(limit))
    for number in range(2, limit + 1):
        has_divisor = any(number % d == 0 for d in range(2, int(number**0.5) + 1))
        assert (number in primes) == (not has_divisor)


def test_equal_without_compare():
    assert equal_without_compare(132, 132) is True
    assert equal_without_compare(132, 133) is False
    assert equal_without_compare(-7, -7) is True


def test_hanoi_first_move_for_three_disks():
    assert next(hanoi_moves(3)) == (1, "A", "C")


@pytest.mark.parametrize("n", range(1, 8))
def test_hanoi_moves_are_legal_and_complete(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_moves(n))
    assert len(moves) == 2**n - 1
    for disk, source, target in moves:
        assert pegs[source][-1] == disk
        pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))


def test_hanoi_zero_disks_has_no_moves():
    assert list(hanoi_moves(0)) == []