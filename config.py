import os
import re
import logging

# ============================================================================
# CONFIGURATION CLASS
# ============================================================================

class Config:
    """Centralized configuration with validation"""

    # Core Constants
    # 2^53 - 1 is the largest integer exactly representable as an IEEE-754 double.
    MAX_INT: int = 2**53 - 1
    MODULUS: int = 2**53
    UINT64_MASK: int = 2**64 - 1
    PRIME_CEILING: int = 2**31
    ID_BYTE_LENGTH: int = 8

    # Parameter initialization
    MILLER_RABIN_ROUNDS: int = int(os.getenv("MILLER_RABIN_ROUNDS", "20"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR: str | None = os.getenv("LOG_DIR")

    # Rate limiting
    RATE_LIMIT_ENCODE: str = os.getenv("RATE_LIMIT_ENCODE", "60/minute")
    RATE_LIMIT_DECODE: str = os.getenv("RATE_LIMIT_DECODE", "30/minute")

    @classmethod
    def log_level(cls, name: str | None = None) -> int:
        """Numeric logging level for `name` (defaults to LOG_LEVEL)"""
        name = (name or cls.LOG_LEVEL).upper()
        levels = logging.getLevelNamesMapping()
        if name not in levels:
            raise ValueError(f"Unknown LOG_LEVEL: {name}")
        return levels[name]

    @classmethod
    def validate(cls):
        """Validate configuration on startup"""
        if cls.MILLER_RABIN_ROUNDS < 20:
            raise ValueError("MILLER_RABIN_ROUNDS must be at least 20")
        cls.log_level()
        for name in ("RATE_LIMIT_ENCODE", "RATE_LIMIT_DECODE"):
            if not RATE_LIMIT_PATTERN.match(getattr(cls, name)):
                raise ValueError(f"{name} must look like '<count>/<period>'")

# ============================================================================
# SINGLETON INSTANCE & DERIVED CONSTANTS
# ============================================================================

RATE_LIMIT_PATTERN = re.compile(r"^\d+\s*/\s*(second|minute|hour|day)$")

config = Config()

# --- Expose class attributes as module constants for convenience ---
for attr in [a for a in dir(config) if not a.startswith('__') and not callable(getattr(config, a))]:
    globals()[attr] = getattr(config, attr)
