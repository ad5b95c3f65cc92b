#!/usr/bin/env python3
import sys
import math
from lattice import InvalidConfiguration, default_threads, estimate_pi

def parse_radius(text):
    """
    Parse a radius such as "1000", "1_000_000", "1e9" or "10^9".

    Raises ValueError on anything else.
    """
    s = text.strip().lower()
    if "^" in s:
        base, exponent = s.split("^", 1)
        exponent = int(exponent)
        if exponent < 0:
            raise ValueError(f"Negative exponent in radius: {text}")
        return int(base) ** exponent
    if "e" in s:
        mantissa, exponent = s.split("e", 1)
        exponent = int(exponent)
        if exponent < 0:
            raise ValueError(f"Negative exponent in radius: {text}")
        return int(mantissa) * 10 ** exponent
    return int(s)

def main(argv=None):
    if argv is None:
        argv = sys.argv
    if len(argv) not in (2, 3):
        print(f"Usage: {argv[0]} <radius> [workers]")
        print("Radius examples: 1000000, 1_000_000, 1e9, 10^9")
        sys.exit(1)

    try:
        radius = parse_radius(argv[1])
        num_workers = int(argv[2]) if len(argv) == 3 else default_threads()
    except ValueError:
        print(f"Invalid arguments: {' '.join(argv[1:])}")
        sys.exit(1)

    try:
        result = estimate_pi(radius, num_workers)
    except InvalidConfiguration as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    print(f"Radius: {radius}")
    print(f"Workers: {num_workers}")
    print(f"Quarter-disc lattice points: {result.quarter_points}")
    print(f"Disc lattice points: {result.disc_points}")
    print(f"Approximated pi: {result.estimate}")
    print(f"Actual value of pi: {math.pi}")
    print(f"Absolute error: {result.abs_error:.3e}")
    print(f"Relative error: {result.rel_error:.3e}")
    print(f"Lattice counting took {result.elapsed * 1000:.2f}ms")

if __name__ == "__main__":
    main()
