import logging
import random

import pytest
from pydantic import ValidationError

from obfuscation import (
    InitializationError, ObfuscationParameters, new_parameters, get_parameters,
    obfuscate, deobfuscate,
)
from primes import PRIMES

MAX_INT = 2**53 - 1


def test_new_parameters_invariants():
    params = new_parameters(rng=random.Random(3))
    assert params.prime in PRIMES
    assert (params.prime * params.mod_inverse) % 2**53 == 1
    assert 1 <= params.mask <= MAX_INT - 1


def test_prime_selection_follows_rng():
    assert new_parameters(rng=random.Random(5)).prime == new_parameters(rng=random.Random(5)).prime


def test_mask_ignores_injected_rng():
    """The prime follows the ordinary rng; the mask must come from the secure source."""
    first = new_parameters(rng=random.Random(5))
    second = new_parameters(rng=random.Random(5))
    assert first.prime == second.prime
    assert first.mask != second.mask


def test_corrupt_prime_table_aborts():
    with pytest.raises(InitializationError):
        new_parameters(pool=(452977335,))


def test_parameters_are_immutable(fixed_params):
    with pytest.raises(ValidationError):
        fixed_params.mask = 2


def test_parameters_repr_hides_secrets():
    params = ObfuscationParameters(prime=3, mod_inverse=pow(3, -1, 2**53), mask=123456789012345)
    assert "123456789012345" not in repr(params)
    assert "prime=3" in repr(params)


@pytest.mark.parametrize("kwargs", [
    {"prime": 452977333, "mod_inverse": 1, "mask": 1},
    {"prime": 452977333, "mod_inverse": pow(452977333, -1, 2**53), "mask": 0},
    {"prime": 452977333, "mod_inverse": pow(452977333, -1, 2**53), "mask": MAX_INT},
    {"prime": 2**31 + 11, "mod_inverse": pow(2**31 + 11, -1, 2**53), "mask": 1},
])
def test_parameters_reject_inconsistent_values(kwargs):
    with pytest.raises(ValidationError):
        ObfuscationParameters(**kwargs)


def test_get_parameters_is_process_wide():
    assert get_parameters() is get_parameters()


def test_zero_maps_to_mask(fixed_params):
    assert obfuscate(0, fixed_params) == fixed_params.mask
    assert deobfuscate(fixed_params.mask, fixed_params) == 0


def test_round_trip_boundaries():
    params = new_parameters()
    for raw in (0, 1, 2, 2**31 - 1, 2**32, 2**52, MAX_INT - 1, MAX_INT):
        enc = obfuscate(raw, params)
        assert 0 <= enc <= MAX_INT
        assert deobfuscate(enc, params) == raw


def test_round_trip_random_sample():
    params = new_parameters()
    rng = random.Random(11)
    for _ in range(2000):
        raw = rng.randint(0, MAX_INT)
        assert deobfuscate(obfuscate(raw, params), params) == raw


def test_forward_is_injective_on_sequential_ids():
    params = new_parameters()
    encoded = {obfuscate(raw, params) for raw in range(20000)}
    assert len(encoded) == 20000


def test_sequential_ids_do_not_look_sequential():
    params = new_parameters()
    deltas = {obfuscate(raw + 1, params) - obfuscate(raw, params) for raw in range(100)}
    assert len(deltas) > 1


def test_bits_above_the_domain_are_discarded(fixed_params):
    raw = 12345
    assert obfuscate(raw + 2**53, fixed_params) == obfuscate(raw, fixed_params)


def test_default_parameters_are_used():
    raw = 987654321
    assert obfuscate(raw) == obfuscate(raw, get_parameters())
    assert deobfuscate(obfuscate(raw)) == raw


def test_independent_parameters_disagree():
    first, second = new_parameters(), new_parameters()
    assert obfuscate(42, first) != obfuscate(42, second)


def test_initialization_is_logged_without_secrets(caplog):
    with caplog.at_level(logging.INFO, logger="obfuscation"):
        params = new_parameters()
    messages = [r.getMessage() for r in caplog.records if r.name == "obfuscation"]
    assert any(f"prime={params.prime}" in m for m in messages)
    assert not any(str(params.mask) in m for m in messages)
