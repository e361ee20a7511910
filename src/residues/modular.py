"""The residue ring Z/nZ: immutable residues and their arithmetic.

Every operation validates its operands before computing and returns a fresh `Residue`, reduced into
`[0, modulus)`. Residues of different moduli never combine silently, a `ModulusMismatchError` is raised instead.

Typical usage example:

    a = Residue.from_signed_integer(-3, 11)
    b = a.inv().times(a)
    g = Residue.primitive_root(997)
    g.pow(996)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
import secrets

from residues.exceptions import InvalidResidueError
from residues.exceptions import ModulusMismatchError
from residues.exceptions import NotInvertibleError
from residues.exceptions import NotPrimeError
from residues.exceptions import PreconditionError
from residues.exceptions import SearchExhaustedError
from residues.integer import check_signed
from residues.integer import check_unsigned
from residues.integer import euler_totient
from residues.integer import gcd
from residues.integer import gcd_with_coefficients
from residues.integer import is_prime
from residues.integer import prime_divisors
from residues.integer import UNSIGNED_MAX

log = logging.getLogger(__name__)

SEARCH_LIMIT: int = 10000


def default_rng(rng: random.Random | None = None) -> random.Random:
    """Return `rng`, or a fresh OS-backed generator when none is supplied."""
    if rng is None:
        return secrets.SystemRandom()
    return rng


class Residue:
    """An element of Z/nZ.

    Direct construction stores the pair as given, without reduction; use `from_unsigned_integer` or
    `from_signed_integer` to build a residue from an arbitrary integer. Operations on a residue that breaks
    `0 <= value < modulus` raise `InvalidResidueError`.

    Attributes:
        value: The representative in `[0, modulus)`.
        modulus: The modulus n, positive and at most `UNSIGNED_MAX`.
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: int, modulus: int) -> None:
        self._value = value
        self._modulus = modulus

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    @staticmethod
    def _check_modulus(modulus: int) -> None:
        check_unsigned(modulus, "modulus")
        if modulus == 0:
            raise PreconditionError("Modulus must be positive")

    @classmethod
    def from_unsigned_integer(cls, n: int, modulus: int) -> "Residue":
        """Reduce the unsigned integer `n` modulo `modulus`."""
        check_unsigned(n)
        cls._check_modulus(modulus)
        return cls(n % modulus, modulus)

    @classmethod
    def from_signed_integer(cls, n: int, modulus: int) -> "Residue":
        """Reduce the signed integer `n` modulo `modulus`.

        The Euclidean remainder is used, so negative inputs land in `[0, modulus)` as well.
        """
        check_signed(n)
        cls._check_modulus(modulus)
        return cls(n % modulus, modulus)

    def _assert_valid(self) -> None:
        if not 0 < self._modulus <= UNSIGNED_MAX or not 0 <= self._value < self._modulus:
            raise InvalidResidueError(self._value, self._modulus)

    def _assert_compatible(self, other: "Residue") -> None:
        self._assert_valid()
        other._assert_valid()
        if self._modulus != other._modulus:
            raise ModulusMismatchError(self._modulus, other._modulus)

    def _reduced(self, value: int) -> "Residue":
        return self.__class__(value % self._modulus, self._modulus)

    def plus(self, other: "Residue") -> "Residue":
        self._assert_compatible(other)
        return self._reduced(self._value + other._value)

    def times(self, other: "Residue") -> "Residue":
        self._assert_compatible(other)
        return self._reduced(self._value * other._value)

    def scalar_times(self, scalar: int) -> "Residue":
        """Multiply by a signed integer scalar, reducing the scalar first."""
        self._assert_valid()
        check_signed(scalar, "scalar")
        return self._reduced(self._value * (scalar % self._modulus))

    def neg(self) -> "Residue":
        return self.scalar_times(-1)

    def is_unit(self) -> bool:
        self._assert_valid()
        return gcd(self._value, self._modulus) == 1

    def inv(self) -> "Residue":
        """The multiplicative inverse, computed from the Bezout coefficients of value and modulus.

        Raises:
            NotInvertibleError: If the residue shares a factor with the modulus.
        """
        self._assert_valid()
        g, u, _ = gcd_with_coefficients(self._value, self._modulus)
        if g != 1:
            raise NotInvertibleError(self._value, self._modulus, g)
        return self._reduced(u)

    def pow(self, exponent: int) -> "Residue":
        """Raise to a signed exponent by square-and-multiply.

        A negative exponent inverts once and then raises the inverse to `-exponent`.

        Raises:
            NotInvertibleError: If `exponent` is negative and the residue is not a unit.
        """
        self._assert_valid()
        check_signed(exponent, "exponent")
        if exponent < 0:
            return self.inv()._square_and_multiply(-exponent)
        return self._square_and_multiply(exponent)

    def _square_and_multiply(self, exponent: int) -> "Residue":
        modulus = self._modulus
        result = 1 % modulus
        base = self._value
        while exponent:
            if exponent & 1:
                result = result * base % modulus
            base = base * base % modulus
            exponent >>= 1
        return self.__class__(result, modulus)

    def _generates(self, order: int, divisors: list[int]) -> bool:
        one = self._reduced(1)
        return all(self._square_and_multiply(order // p) != one for p in divisors)

    def is_primitive_root(self) -> bool:
        """Check whether the residue generates the whole unit group of its prime modulus.

        Raises:
            NotPrimeError: If the modulus is not prime.
        """
        self._assert_valid()
        if not is_prime(self._modulus):
            raise NotPrimeError(f"Primitive root test needs a prime modulus, got {self._modulus}")
        if self._value == 0:
            return False
        order = self._modulus - 1
        return self._generates(order, prime_divisors(order))

    @classmethod
    def primitive_root(cls,
                       modulus: int,
                       rng: random.Random | None = None,
                       limit: int = SEARCH_LIMIT) -> "Residue":
        """Find a primitive root modulo a prime by random search.

        Candidates are drawn uniformly from `[1, modulus)`. A candidate g is accepted if g^(phi/p) != 1 for every
        prime p dividing phi = modulus - 1. Composite moduli are rejected even where primitive roots exist.

        Args:
            modulus: A prime modulus.
            rng: Random source, defaults to the OS generator.
            limit: Number of candidates to try before giving up.

        Returns:
            A generator of the multiplicative group modulo `modulus`.

        Raises:
            NotPrimeError: If `modulus` is not prime.
            SearchExhaustedError: If no generator was found within `limit` candidates.
        """
        cls._check_modulus(modulus)
        if not is_prime(modulus):
            raise NotPrimeError(f"Primitive roots are only searched for prime moduli, got {modulus}")
        rng = default_rng(rng)
        order = euler_totient(modulus)
        divisors = prime_divisors(order)
        for trial in range(1, limit + 1):
            candidate = cls(rng.randrange(1, modulus), modulus)
            if candidate._generates(order, divisors):
                log.debug("Primitive root %d (mod %d) found after %d trials", candidate.value, modulus, trial)
                return candidate
        raise SearchExhaustedError(f"No primitive root modulo {modulus} found in {limit} trials.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Residue):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash((self._value, self._modulus))

    def __repr__(self) -> str:
        return f"Residue(value={self._value}, modulus={self._modulus})"

    def __int__(self) -> int:
        return self._value

    def __add__(self, other: "Residue") -> "Residue":
        if not isinstance(other, Residue):
            return NotImplemented
        return self.plus(other)

    def __mul__(self, other: "Residue | int") -> "Residue":
        if isinstance(other, Residue):
            return self.times(other)
        if isinstance(other, int):
            return self.scalar_times(other)
        return NotImplemented

    def __rmul__(self, other: int) -> "Residue":
        if isinstance(other, int):
            return self.scalar_times(other)
        return NotImplemented

    def __neg__(self) -> "Residue":
        return self.neg()

    def __pow__(self, exponent: int) -> "Residue":
        return self.pow(exponent)
