"""Textbook ElGamal encryption of integer sequences modulo a prime.

One ephemeral exponent is drawn per message and reused for every unit of it. This keeps the scheme short but
weakens it: two ciphertext units of one message reveal the ratio of their plaintexts. Encrypting more than one unit
therefore issues a `RuntimeWarning`.

Typical usage example:

    base = choose_base(2677)
    private_key, public_key = generate_key_pair(base)
    c = encrypt(base, [42], public_key)
    assert decrypt(c, private_key) == [42]
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
from typing import Sequence
import warnings

from residues.exceptions import ModulusMismatchError
from residues.exceptions import PreconditionError
from residues.integer import SIGNED_MAX
from residues.modular import default_rng
from residues.modular import Residue


def choose_base(modulus: int, rng: random.Random | None = None) -> Residue:
    """Pick a primitive root of the prime `modulus` as the public base."""
    return Residue.primitive_root(modulus, rng)


def _draw_exponent(modulus: int, rng: random.Random) -> int:
    """Draw a secret exponent uniformly from `[1, modulus)`, capped at the signed width.

    Args:
        modulus: The prime modulus of the base.
        rng: Random source.

    Returns:
        The exponent, at least 1.

    Raises:
        PreconditionError: If the modulus leaves no exponent to draw from.
    """
    if modulus < 2:
        raise PreconditionError(f"Modulus {modulus} leaves no exponent to draw from.")
    return rng.randrange(1, min(modulus, SIGNED_MAX))


def generate_key_pair(base: Residue, rng: random.Random | None = None) -> tuple[int, Residue]:
    """Generate an ElGamal key pair for `base`.

    Returns:
        Tuple of (private key drawn from `[1, modulus)`, public key `base**private_key`).
    """
    rng = default_rng(rng)
    private_key = _draw_exponent(base.modulus, rng)
    return private_key, base.pow(private_key)


def encrypt(base: Residue,
            message: Sequence[int],
            public_key: Residue,
            rng: random.Random | None = None) -> list[tuple[Residue, Residue]]:
    """Encrypt a sequence of plaintext units.

    Args:
        base: The public base the key pair was generated with.
        message: Plaintext units, each in `[0, modulus)`.
        public_key: The recipient's public key.
        rng: Random source for the ephemeral exponent, defaults to the OS generator.

    Returns:
        One `(base**k, unit * public_key**k)` pair per unit, all sharing the same ephemeral `k`.

    Raises:
        ModulusMismatchError: If `base` and `public_key` have different moduli.
        PreconditionError: If a unit is outside `[0, modulus)`.
    """
    if base.modulus != public_key.modulus:
        raise ModulusMismatchError(base.modulus, public_key.modulus)
    for piece in message:
        if not 0 <= piece < base.modulus:
            raise PreconditionError("Message pieces cannot exceed modulus.")
    if len(message) > 1:
        warnings.warn("ElGamal reuses one ephemeral exponent across the whole message! Please use with care.",
                      RuntimeWarning)
    rng = default_rng(rng)
    ephemeral = _draw_exponent(base.modulus, rng)
    c1 = base.pow(ephemeral)
    mask = public_key.pow(ephemeral)
    return [(c1, Residue.from_unsigned_integer(piece, base.modulus).times(mask)) for piece in message]


def decrypt(ciphertext: Sequence[tuple[Residue, Residue]], private_key: int) -> list[int]:
    """Recover each unit as `c2 * (c1**private_key)**-1`."""
    return [c1.pow(private_key).inv().times(c2).value for c1, c2 in ciphertext]
