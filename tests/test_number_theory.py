import io

import pytest

from algokit.number_theory import (
    count_distinct_prime_factors,
    josephus_survivor,
    main,
)

PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("prime", [2, 3, 97, 7919])
def test_a_prime_has_one_prime_factor(prime):
    assert count_distinct_prime_factors(prime) == 1


@pytest.mark.parametrize("prime", [2, 3, 7])
@pytest.mark.parametrize("exponent", [2, 5, 10])
def test_prime_powers_have_one_prime_factor(prime, exponent):
    assert count_distinct_prime_factors(prime**exponent) == 1


@pytest.mark.parametrize("k", range(1, len(PRIMES) + 1))
def test_product_of_distinct_primes(k):
    product = 1
    for prime in PRIMES[:k]:
        product *= prime
    assert count_distinct_prime_factors(product) == k


def test_one_has_no_prime_factors():
    assert count_distinct_prime_factors(1) == 0


@pytest.mark.parametrize("n", [6, 12, 30, 97, 360, 1001])
def test_sign_is_ignored(n):
    assert count_distinct_prime_factors(-n) == count_distinct_prime_factors(n)


@pytest.mark.parametrize("a, b", [(4, 9), (8, 15), (49, 10), (121, 26)])
def test_coprime_counts_add(a, b):
    assert count_distinct_prime_factors(a * b) == (
        count_distinct_prime_factors(a) + count_distinct_prime_factors(b)
    )


def test_zero_is_rejected():
    with pytest.raises(ValueError):
        count_distinct_prime_factors(0)


@pytest.mark.parametrize("k", range(0, 12))
def test_josephus_power_of_two_keeps_first(k):
    assert josephus_survivor(2**k) == 1


@pytest.mark.parametrize("n", range(1, 200))
def test_josephus_survivor_is_odd_and_in_range(n):
    survivor = josephus_survivor(n)
    assert survivor % 2 == 1
    assert 1 <= survivor <= n


@pytest.mark.parametrize("n", range(1, 100))
def test_josephus_recurrence(n):
    assert josephus_survivor(2 * n) == 2 * josephus_survivor(n) - 1
    assert josephus_survivor(2 * n + 1) == 2 * josephus_survivor(n) + 1


def test_josephus_classic_forty_one():
    assert josephus_survivor(41) == 19


@pytest.mark.parametrize("n", [0, -5])
def test_josephus_rejects_empty_circle(n):
    with pytest.raises(ValueError):
        josephus_survivor(n)


def test_main_primes_stops_at_zero(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("97\n0\n30\n"))
    assert main(["primes"]) == 0
    assert capsys.readouterr().out == "Total distinct primefactor = 1\n"


def test_main_josephus(capsys):
    main(["josephus", "64"])
    assert capsys.readouterr().out == "1\n"


def test_main_josephus_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("41\n"))
    main(["josephus"])
    assert capsys.readouterr().out.strip() == str(josephus_survivor(41))