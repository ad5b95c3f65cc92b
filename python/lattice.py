import math
import os
import time
from concurrent.futures import ThreadPoolExecutor
import numpy as np
from isqrt import INT64_RADIUS_LIMIT, integer_sqrt, integer_sqrt_array

DEFAULT_BLOCK_SIZE = 1 << 20

class InvalidConfiguration(ValueError):
    pass

class LatticeEstimate:
    def __init__(self, radius, num_threads, quarter_points, elapsed):
        self.radius = radius
        self.num_threads = num_threads
        self.quarter_points = quarter_points
        self.elapsed = elapsed
        self.estimate = 4.0 * quarter_points / (radius * radius)
        self.abs_error = abs(self.estimate - math.pi)
        self.rel_error = self.abs_error / math.pi

    @property
    def total_points(self):
        return 4 * self.quarter_points

    @property
    def disc_points(self):
        return disc_from_quarter(self.radius, self.quarter_points)

def validate(n, num_threads):
    # bools are ints, reject them explicitly
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidConfiguration(f"radius must be an integer, got {n!r}")
    if n < 0:
        raise InvalidConfiguration(f"radius must be non-negative, got {n}")
    if not isinstance(num_threads, int) or isinstance(num_threads, bool):
        raise InvalidConfiguration(f"thread count must be an integer, got {num_threads!r}")
    if num_threads < 1:
        raise InvalidConfiguration(f"thread count must be at least 1, got {num_threads}")

def default_threads():
    return os.cpu_count() or 1

def partition_columns(n, num_threads):
    """Split the columns 0..n into num_threads contiguous half-open chunks."""
    columns = n + 1
    cols_per_worker = columns // num_threads

    chunks = []
    for i in range(num_threads):
        start = i * cols_per_worker
        end = start + cols_per_worker if i < num_threads - 1 else columns
        chunks.append((start, end))
    return chunks

def count_columns(n, start, end):
    nn = n * n
    points = 0

    for x in range(start, end):
        rem = nn - x * x
        if rem < 0:
            continue
        points += integer_sqrt(rem) + 1

    return points

def count_columns_vectorized(n, start, end, block_size=DEFAULT_BLOCK_SIZE):
    """
    Same as count_columns, computed block by block with numpy.

    Only valid while n <= INT64_RADIUS_LIMIT.
    """
    if n > INT64_RADIUS_LIMIT:
        raise OverflowError(f"radius {n} exceeds the int64 range of the vectorised counter")

    # columns past n contribute nothing
    end = min(end, n + 1)
    nn = np.int64(n * n)
    points = 0

    for lo in range(start, end, block_size):
        hi = min(lo + block_size, end)
        xs = np.arange(lo, hi, dtype=np.int64)
        roots = integer_sqrt_array(nn - xs * xs)
        points += int(roots.sum()) + (hi - lo)

    return points

def column_counter(n):
    if n <= INT64_RADIUS_LIMIT:
        return count_columns_vectorized
    return count_columns

def count_quarter_points(n, num_threads=None):
    """Number of lattice points with x, y >= 0 and x^2 + y^2 <= n^2."""
    if num_threads is None:
        num_threads = default_threads()
    validate(n, num_threads)

    counter = column_counter(n)
    chunks = partition_columns(n, num_threads)

    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        futures = []
        for start, end in chunks:
            future = executor.submit(counter, n, start, end)
            futures.append(future)

        partial_sums = [future.result() for future in futures]

    return sum(partial_sums)

def count_lattice_points(n, num_threads=None):
    """First-quadrant count scaled to all four quadrants, axes not deduplicated."""
    quarter_points = count_quarter_points(n, num_threads)
    if n == 0:
        # only the origin
        return quarter_points
    return 4 * quarter_points

def disc_from_quarter(n, quarter_points):
    # Adjacent quadrants share n axis points each; the origin is shared by all four.
    return 4 * quarter_points - 4 * n - 3

def count_disc_points(n, num_threads=None):
    return disc_from_quarter(n, count_quarter_points(n, num_threads))

def estimate_pi(n, num_threads=None):
    if num_threads is None:
        num_threads = default_threads()
    validate(n, num_threads)
    if n == 0:
        raise InvalidConfiguration("cannot estimate pi from a radius of 0")

    start_time = time.time()
    quarter_points = count_quarter_points(n, num_threads)
    elapsed = time.time() - start_time

    return LatticeEstimate(n, num_threads, quarter_points, elapsed)
