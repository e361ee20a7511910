"""Modular Arithmetic and Textbook Public-Key Protocols in an Academic Sense.

Provides a residue ring abstraction for Z/nZ on top of a small number theory library (primality, extended gcd,
integer square roots, factorization, Euler's totient), and builds textbook Diffie-Hellman, ElGamal and RSA on it.
All integers are bounded by a fixed width of `INTEGER_WIDTH` bits. Not hardened for real-world use.

Typical usage example:

    a = Residue.from_signed_integer(-3, 11)
    a.inv()
    base = diffie_hellman.choose_base(997)
    n, e = rsa.generate_public_key(2677, 3217)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from residues import diffie_hellman
from residues import elgamal
from residues import rsa
from residues.exceptions import InvalidResidueError
from residues.exceptions import ModulusMismatchError
from residues.exceptions import NotInvertibleError
from residues.exceptions import NotPrimeError
from residues.exceptions import PreconditionError
from residues.exceptions import ResidueError
from residues.exceptions import SearchExhaustedError
from residues.exceptions import WidthError
from residues.integer import euler_totient
from residues.integer import gcd
from residues.integer import gcd_with_coefficients
from residues.integer import INTEGER_WIDTH
from residues.integer import is_prime
from residues.integer import isqrt
from residues.integer import prime_factorize
from residues.modular import Residue

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"
__all__ = [
    "Residue",
    "is_prime",
    "gcd",
    "gcd_with_coefficients",
    "isqrt",
    "prime_factorize",
    "euler_totient",
    "INTEGER_WIDTH",
    "diffie_hellman",
    "elgamal",
    "rsa",
    "ResidueError",
    "PreconditionError",
    "InvalidResidueError",
    "ModulusMismatchError",
    "WidthError",
    "NotPrimeError",
    "NotInvertibleError",
    "SearchExhaustedError",
]
