import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from obfuscation import ObfuscationParameters
from mymath import mod_inverse

FIXED_PRIME = 452977333


@pytest.fixture
def fixed_params() -> ObfuscationParameters:
    """Known parameters, so encoded values can be asserted exactly."""
    return ObfuscationParameters(
        prime=FIXED_PRIME,
        mod_inverse=mod_inverse(FIXED_PRIME, 2**53),
        mask=1,
    )
