"""
Integer obfuscation to prevent sequential scraping of database identifiers.

Identifiers are permuted within a 53-bit space by multiplying with a prime and
XOR-ing with a random mask. It is not cryptographically secure: a handful of known
(raw, obfuscated) pairs is enough to recover the parameters. It only makes IDs
appear random and non-sequential.

The parameters are chosen once per process and never change, so obfuscated values
are not portable between processes.
"""
import logging
import random
from functools import lru_cache
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

import config
from mymath import miller_rabin, mod_inverse, rand_n, wrapping_mul_u64
from primes import PRIMES

logger = logging.getLogger(__name__)


class InitializationError(RuntimeError):
    """The prime table is corrupt. Not recoverable."""


class ObfuscationParameters(BaseModel):
    """Immutable, process-wide transform parameters."""
    model_config = ConfigDict(frozen=True)

    prime: int = Field(..., gt=2, lt=config.PRIME_CEILING)
    mod_inverse: int = Field(..., gt=0, le=config.MAX_INT, repr=False)
    mask: int = Field(..., ge=1, le=config.MAX_INT - 1, repr=False)

    @model_validator(mode='after')
    def check_inverse(self):
        if self.prime % 2 == 0:
            raise ValueError("prime must be odd")
        if (self.prime * self.mod_inverse) & config.MAX_INT != 1:
            raise ValueError("mod_inverse is not the inverse of prime modulo 2**53")
        return self


def new_parameters(pool: Sequence[int] = PRIMES, rng=random) -> ObfuscationParameters:
    """
    Builds a fresh set of parameters.

    The prime index comes from an ordinary random source; the table is public.
    The mask is the actual secret and is always drawn from `secrets`.
    """
    prime = pool[rng.randrange(len(pool))]

    if not miller_rabin(prime, config.MILLER_RABIN_ROUNDS, rng):
        accuracy = 1.0 - 1.0 / 4 ** config.MILLER_RABIN_ROUNDS
        logger.critical(f"Prime table entry {prime} failed the primality check")
        raise InitializationError(f"{prime} is not a valid prime. [Accuracy: {accuracy:f}]")

    params = ObfuscationParameters(
        prime=prime,
        mod_inverse=mod_inverse(prime, config.MODULUS),
        mask=rand_n(config.MAX_INT - 1),
    )
    logger.info(f"Obfuscation parameters initialized (prime={prime})")
    return params


@lru_cache()
def get_parameters() -> ObfuscationParameters:
    """
    Returns the cached, process-wide parameters.
    Built on first use; call it during startup to fail fast.
    """
    return new_parameters()


def obfuscate(n: int, params: ObfuscationParameters | None = None) -> int:
    """Scrambles a sequential integer ID to make it appear random."""
    params = params or get_parameters()
    return (wrapping_mul_u64(n, params.prime) & config.MAX_INT) ^ params.mask


def deobfuscate(n: int, params: ObfuscationParameters | None = None) -> int:
    """
    Reverses the scrambling to retrieve the original sequential ID.
    Only correct when `params` are the ones `n` was obfuscated with.
    """
    params = params or get_parameters()
    return wrapping_mul_u64(n ^ params.mask, params.mod_inverse) & config.MAX_INT
