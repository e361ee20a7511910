"""Integer utilities underpinning the residue ring: primality, gcd, square roots, factorization and the totient.

Everything here is exact integer arithmetic, no floating point is involved at any step. The functions themselves
accept any Python int; the fixed integer width of the package is enforced at the residue and protocol level through
`check_unsigned` and `check_signed`.

Typical usage example:

    is_prime(91)
    g, u, v = gcd_with_coefficients(527, 1258)
    prime_factorize(360)
    euler_totient(360)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from residues.exceptions import PreconditionError
from residues.exceptions import WidthError

INTEGER_WIDTH: int = 128
UNSIGNED_MAX: int = 2**INTEGER_WIDTH - 1
SIGNED_MIN: int = -(2**(INTEGER_WIDTH - 1))
SIGNED_MAX: int = 2**(INTEGER_WIDTH - 1) - 1


def check_unsigned(n: int, name: str = "value") -> int:
    """Ensure `n` fits the unsigned fixed-width range `[0, UNSIGNED_MAX]`.

    Raises:
        WidthError: If `n` is negative or too large.
    """
    if not 0 <= n <= UNSIGNED_MAX:
        raise WidthError(f"{name} {n} does not fit an unsigned {INTEGER_WIDTH}-bit integer")
    return n


def check_signed(n: int, name: str = "value") -> int:
    """Ensure `n` fits the signed fixed-width range `[SIGNED_MIN, SIGNED_MAX]`.

    Raises:
        WidthError: If `n` is out of range.
    """
    if not SIGNED_MIN <= n <= SIGNED_MAX:
        raise WidthError(f"{name} {n} does not fit a signed {INTEGER_WIDTH}-bit integer")
    return n


def is_prime(n: int) -> bool:
    """Deterministic primality test by trial division.

    Divides by 2, 3 and then by every candidate of the form 6k±1 up to the square root of `n`.
    Exact for every integer, but O(sqrt(n)) so impractical for very large `n`.

    Args:
        n: The number to test.

    Returns:
        True if `n` is prime, False otherwise (including for 0, 1 and negatives).
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def gcd(x: int, y: int) -> int:
    """Greatest common divisor by the iterative Euclidean algorithm. Never negative."""
    x, y = abs(x), abs(y)
    while y != 0:
        x, y = y, x % y
    return x


def gcd_with_coefficients(x: int, y: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that u*x + v*y = g = gcd(x, y).

    Args:
        x: The first integer.
        y: The second integer.

    Returns:
        The non-negative greatest common divisor of `x` and `y`,
        as well as the Bezout coefficients `u` and `v`.
    """
    r0, r1 = x, y
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    if r0 < 0:
        r0, s0, t0 = -r0, -s0, -t0
    return r0, s0, t0


def isqrt(n: int) -> int:
    """Integer square root, extracted one binary digit pair at a time.

    Args:
        n: A non-negative integer.

    Returns:
        The largest `r` with `r*r <= n`.

    Raises:
        PreconditionError: If `n` is negative.
    """
    if n < 0:
        raise PreconditionError(f"Square root of negative number {n}")
    if n == 0:
        return 0
    bit = 1 << ((n.bit_length() - 1) & ~1)
    root = 0
    while bit:
        if n >= root + bit:
            n -= root + bit
            root = (root >> 1) + bit
        else:
            root >>= 1
        bit >>= 2
    return root


def prime_factorize(n: int) -> list[tuple[int, int]]:
    """Factorize `n` into prime powers by trial division.

    Args:
        n: A positive integer.

    Returns:
        List of `(prime, exponent)` pairs in ascending prime order. Empty for `n == 1`.

    Raises:
        PreconditionError: If `n` is zero or negative.
    """
    if n < 1:
        raise PreconditionError(f"Cannot factorize {n}")
    factors = []
    divisor = 2
    limit = isqrt(n)
    while divisor <= limit:
        if n % divisor == 0:
            exponent = 0
            while n % divisor == 0:
                n //= divisor
                exponent += 1
            factors.append((divisor, exponent))
            limit = isqrt(n)
        divisor += 1 if divisor == 2 else 2
    if n > 1:
        factors.append((n, 1))
    return factors


def prime_divisors(n: int) -> list[int]:
    """The distinct primes dividing `n`, ascending."""
    return [p for p, _ in prime_factorize(n)]


def euler_totient(n: int) -> int:
    """Euler's totient, the count of integers in `[1, n]` coprime to `n`.

    Uses the product formula phi(n) = n * prod(1 - 1/p), kept in integers by subtracting phi // p for every
    distinct prime p (phi stays divisible by every prime not yet processed).

    Raises:
        PreconditionError: If `n` is zero or negative.
    """
    phi = n
    for p in prime_divisors(n):
        phi -= phi // p
    return phi
