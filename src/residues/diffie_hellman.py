"""Textbook Diffie-Hellman key exchange over the multiplicative group of a prime field.

Typical usage example:

    base = choose_base(997)
    a_secret, a_share = generate_secret_and_shared_value(base)
    b_secret, b_share = generate_secret_and_shared_value(base)
    assert compute_shared_secret(a_secret, b_share) == compute_shared_secret(b_secret, a_share)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random

from residues.integer import SIGNED_MAX
from residues.integer import SIGNED_MIN
from residues.modular import default_rng
from residues.modular import Residue


def choose_base(modulus: int, rng: random.Random | None = None) -> Residue:
    """Pick a primitive root of the prime `modulus` as the public base."""
    return Residue.primitive_root(modulus, rng)


def generate_secret_and_shared_value(base: Residue, rng: random.Random | None = None) -> tuple[int, Residue]:
    """Draw a private secret and compute the value to publish.

    Args:
        base: The agreed public base.
        rng: Random source, defaults to the OS generator.

    Returns:
        Tuple of (private secret, `base` raised to the secret). The secret is a uniformly drawn signed
        fixed-width integer and may be negative.
    """
    rng = default_rng(rng)
    private_secret = rng.randint(SIGNED_MIN, SIGNED_MAX)
    return private_secret, base.pow(private_secret)


def compute_shared_secret(private_secret: int, other_shared_value: Residue) -> Residue:
    """Combine our secret with the other party's published value."""
    return other_shared_value.pow(private_secret)
