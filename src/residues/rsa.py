"""Textbook RSA over residues.

The public key is the pair (N, e). The private side is kept as the prime pair (p, q) together with e, the
decryption exponent d is derived whenever it is needed. Keys live in memory only.

Typical usage example:

    n, e = generate_public_key(2677, 3217)
    c = encrypt([1234, 5678], (n, e))
    assert decrypt(2677, 3217, c, e) == [1234, 5678]
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
from typing import Sequence

from residues.exceptions import ModulusMismatchError
from residues.exceptions import PreconditionError
from residues.exceptions import SearchExhaustedError
from residues.exceptions import WidthError
from residues.integer import check_unsigned
from residues.integer import gcd
from residues.integer import SIGNED_MAX
from residues.modular import default_rng
from residues.modular import Residue
from residues.modular import SEARCH_LIMIT

log = logging.getLogger(__name__)


def _totient(p: int, q: int) -> int:
    check_unsigned(p, "p")
    check_unsigned(q, "q")
    if p < 2 or q < 2 or p == q:
        raise PreconditionError(f"RSA needs two distinct primes, got {p} and {q}")
    check_unsigned(p * q, "modulus")
    totient = (p - 1) * (q - 1)
    if totient > SIGNED_MAX:
        raise WidthError(f"(p-1)(q-1) = {totient} leaves exponents outside the signed range")
    return totient


def generate_public_key(p: int,
                        q: int,
                        rng: random.Random | None = None,
                        limit: int = SEARCH_LIMIT) -> tuple[int, int]:
    """Given two secret primes, generate the corresponding public key.

    The exponent is found by trial and error over uniform candidates in `[1, (p-1)(q-1))` until one is coprime
    to `(p-1)(q-1)`. Primality of `p` and `q` is the caller's responsibility.

    Args:
        p: The first secret prime.
        q: The second secret prime, distinct from `p`.
        rng: Random source, defaults to the OS generator.
        limit: Number of candidates to try before giving up.

    Returns:
        The public key (N, e).

    Raises:
        PreconditionError: If `p` and `q` cannot form a key.
        SearchExhaustedError: If no exponent was found within `limit` candidates.
    """
    totient = _totient(p, q)
    rng = default_rng(rng)
    for trial in range(1, limit + 1):
        e = rng.randrange(1, totient)
        if gcd(e, totient) == 1:
            log.debug("Public exponent found after %d trials", trial)
            return p * q, e
    raise SearchExhaustedError(f"No public exponent coprime to {totient} found in {limit} trials.")


def private_exponent(p: int, q: int, e: int) -> int:
    """Derive the decryption exponent d = e^-1 mod (p-1)(q-1)."""
    totient = _totient(p, q)
    return Residue.from_unsigned_integer(e, totient).inv().value


def encrypt(message: Sequence[int], public_key: tuple[int, int]) -> list[Residue]:
    """Raise every unit of `message`, each in `[0, N)`, to the public exponent.

    Raises:
        PreconditionError: If a unit is outside `[0, N)`.
    """
    n, e = public_key
    for piece in message:
        if not 0 <= piece < n:
            raise PreconditionError("Message pieces cannot exceed modulus.")
    return [Residue.from_unsigned_integer(piece, n).pow(e) for piece in message]


def decrypt(p: int, q: int, ciphertext: Sequence[Residue], e: int) -> list[int]:
    """Decrypt with the derived private exponent.

    Raises:
        ModulusMismatchError: If a ciphertext unit is not a residue modulo p*q.
        NotInvertibleError: If `e` is not coprime to (p-1)(q-1).
    """
    d = private_exponent(p, q, e)
    n = p * q
    ret = []
    for piece in ciphertext:
        if piece.modulus != n:
            raise ModulusMismatchError(piece.modulus, n)
        ret.append(piece.pow(d).value)
    return ret
