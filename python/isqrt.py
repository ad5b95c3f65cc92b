import math
import numpy as np

# Largest radius whose (n + 2)^2 still fits in a signed 64-bit integer.
# Above this the vectorised path would overflow, so callers must use the scalar one.
INT64_RADIUS_LIMIT = math.isqrt(np.iinfo(np.int64).max) - 2
FLOAT_GUESS_MAX_BITS = 100

def newton_sqrt(value):
    """Floor square root using integer-only Newton-Raphson."""
    if value < 0:
        raise ValueError(f"square root of negative number: {value}")
    if value < 2:
        return value

    # 2^ceil(bits/2) is never below the true root, so the iteration decreases monotonically
    guess = 1 << ((value.bit_length() + 1) // 2)
    while True:
        next_guess = (guess + value // guess) // 2
        if next_guess >= guess:
            return guess
        guess = next_guess

def integer_sqrt(value):
    """
    Floor square root of a non-negative integer.

    Starts from the float64 estimate and corrects it in integer arithmetic,
    so the result is exact even when value is past 2^53. Values wider than
    FLOAT_GUESS_MAX_BITS go straight to newton_sqrt.
    """
    if value < 0:
        raise ValueError(f"square root of negative number: {value}")

    # past ~100 bits the float guess is off by more than a few units
    if value.bit_length() > FLOAT_GUESS_MAX_BITS:
        return newton_sqrt(value)

    guess = int(math.sqrt(value))

    while guess * guess > value:
        guess -= 1
    while (guess + 1) * (guess + 1) <= value:
        guess += 1
    return guess

def integer_sqrt_array(values):
    values = np.asarray(values, dtype=np.int64)
    if values.size and values.min() < 0:
        raise ValueError("square root of negative number in array")

    roots = np.floor(np.sqrt(values.astype(np.float64))).astype(np.int64)

    while True:
        too_high = roots * roots > values
        too_low = (roots + 1) * (roots + 1) <= values
        if not (too_high.any() or too_low.any()):
            return roots
        roots -= too_high.astype(np.int64)
        roots += too_low.astype(np.int64)
