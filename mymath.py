"""
Number theory helpers for the identifier transform.
"""
import random
import secrets

from config import UINT64_MASK


def miller_rabin(n: int, rounds: int = 20, rng: random.Random | None = None) -> bool:
    """
    Probabilistic primality test.

    A composite passes a single round with probability at most 1/4, so the
    false-positive bound after `rounds` rounds is 4**-rounds.
    """
    if rounds < 1:
        raise ValueError("Miller-Rabin needs at least one round")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    rng = rng or random
    # n - 1 = 2^r * d with d odd
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for _ in range(rounds):
        a = rng.randrange(2, n - 1)
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Returns (g, x, y) such that a*x + b*y == g == gcd(a, b)."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Modular multiplicative inverse of a modulo m, in [0, m)."""
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def rand_n(n: int) -> int:
    """Cryptographically secure random integer in [1, n]."""
    if n < 1:
        raise ValueError("Upper bound must be a positive integer")
    return secrets.randbelow(n) + 1


def wrapping_mul_u64(a: int, b: int) -> int:
    # Unsigned 64-bit multiply that wraps on overflow.
    return (a * b) & UINT64_MASK
