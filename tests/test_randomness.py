"""
Tests for numtasks/randomness.py

Draws are checked for range and coverage rather than exact values, except
where a seed is set explicitly.
"""

import threading

import pytest

from numtasks import randomness
from numtasks.randomness import get_random_integer, seed_random_generator
from numtasks.utils.errors import InvalidValueError, TypeMismatchError


@pytest.fixture(autouse=True)
def fresh_generator(clean_settings):
    """Each test starts without a shared generator and with default settings."""
    randomness._generator = None
    yield
    randomness._generator = None


@pytest.mark.parametrize("min_value, max_value", [(1, 2), (-5, 0), (-1, 1), (0, 100), (7, 7)])
def test_get_random_integer_stays_in_range(min_value, max_value):
    """Every draw is an int within the inclusive bounds."""
    for _ in range(1000):
        value = get_random_integer(min_value, max_value)
        assert isinstance(value, int)
        assert min_value <= value <= max_value


def test_get_random_integer_covers_both_endpoints():
    """Both bounds are reachable."""
    seen = {get_random_integer(-1, 1) for _ in range(500)}
    assert seen == {-1, 0, 1}


def test_get_random_integer_rejects_inverted_range():
    with pytest.raises(InvalidValueError, match="min should be less than or equal to max"):
        get_random_integer(5, 1)


@pytest.mark.parametrize("min_value, max_value", [(0.5, 3), (0, 2**53), (-(2**60), 0)])
def test_get_random_integer_rejects_unsafe_bounds(min_value, max_value):
    with pytest.raises(InvalidValueError):
        get_random_integer(min_value, max_value)


def test_get_random_integer_rejects_non_numbers():
    with pytest.raises(TypeMismatchError):
        get_random_integer("1", 5)


def test_seed_random_generator_makes_draws_repeatable():
    seed_random_generator(42)
    first = [get_random_integer(0, 1000) for _ in range(20)]
    seed_random_generator(42)
    second = [get_random_integer(0, 1000) for _ in range(20)]
    assert first == second


def test_generator_is_seeded_from_settings(monkeypatch):
    """NUMTASKS_RANDOM_SEED controls the lazily created generator."""
    from numtasks.config.settings import reset_settings

    monkeypatch.setenv("NUMTASKS_RANDOM_SEED", "7")
    reset_settings()
    first = [get_random_integer(0, 1000) for _ in range(20)]

    randomness._generator = None
    second = [get_random_integer(0, 1000) for _ in range(20)]
    assert first == second


def test_get_random_integer_is_safe_across_threads():
    """Concurrent draws all succeed and stay in range."""
    results = []
    errors = []

    def worker():
        try:
            results.extend(get_random_integer(1, 6) for _ in range(500))
        except Exception as e:  # pragma: no cover - reported below
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert len(results) == 8 * 500
    assert set(results) <= {1, 2, 3, 4, 5, 6}
