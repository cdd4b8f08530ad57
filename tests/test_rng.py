import math

import pytest

from circuitgen.rng import RNG


def test_random_follows_sine_recurrence():
    rng = RNG(0)

    first = rng.random()

    assert first == pytest.approx(0.983341664682815, abs=1e-12)
    assert rng.state == first
    expected = math.fmod(abs(math.sin(first * 128 + 0.1) * 100), 1.0)
    assert rng.random() == expected


def test_same_seed_reproduces_stream():
    a = RNG(123456789012)
    b = RNG(123456789012)

    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_draws_stay_in_range():
    rng = RNG(987654321)

    for _ in range(2000):
        value = rng.random()
        assert 0.0 <= value < 1.0

        u = rng.uniform(-3.0, 7.5)
        assert -3.0 <= u < 7.5

        k = rng.integer(2, 9)
        assert isinstance(k, int)
        assert 2 <= k < 9


def test_shuffle_is_permutation_and_consumes_length_minus_one_draws():
    items = list(range(17))
    rng = RNG(42)
    reference = RNG(42)

    rng.shuffle(items)
    for _ in range(16):
        reference.random()

    assert sorted(items) == list(range(17))
    assert rng.state == reference.state


def test_shuffle_short_sequences_consume_nothing():
    rng = RNG(5)
    before = rng.state

    empty: list = []
    single = ["a"]
    rng.shuffle(empty)
    rng.shuffle(single)

    assert empty == []
    assert single == ["a"]
    assert rng.state == before


def test_choose_returns_member():
    rng = RNG(77)
    options = ["10,5", "5,5", "2,2"]

    for _ in range(200):
        assert rng.choose(options) in options


def test_choose_weighted_returns_member_and_skips_trailing_zero_weight():
    rng = RNG(31337)
    items = ["line", "arc", "squiggle"]

    picks = [rng.choose_weighted(items, [0.2, 0.8, 0.0]) for _ in range(500)]

    assert set(picks) <= {"line", "arc"}
    assert "arc" in picks


def test_choose_weighted_falls_back_to_last_item(monkeypatch):
    rng = RNG(1)
    monkeypatch.setattr(rng, "random", lambda: 1.5)

    assert rng.choose_weighted(["a", "b", "c"], [1.0, 1.0, 1.0]) == "c"


@pytest.mark.parametrize(
    "items, weights",
    [
        ([], []),
        (["a", "b"], [1.0]),
        (["a", "b"], [0.0, 0.0]),
    ],
)
def test_choose_weighted_rejects_bad_tables(items, weights):
    with pytest.raises(ValueError):
        RNG(3).choose_weighted(items, weights)


def test_choose_rejects_empty_sequence():
    with pytest.raises(ValueError):
        RNG(3).choose([])


@pytest.mark.parametrize("seed", [float("nan"), float("inf")])
def test_non_finite_seed_rejected(seed):
    with pytest.raises(ValueError):
        RNG(seed)
