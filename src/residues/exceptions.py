"""Exceptions raised by the residue ring, the integer utilities and the protocols built on them.

Caller mistakes derive from `PreconditionError` (itself a `ValueError`), while a probabilistic search running past
its iteration cap raises `SearchExhaustedError` (a `RuntimeError`).
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class ResidueError(Exception):
    """Base class for all errors raised on purpose by residues."""


class PreconditionError(ResidueError, ValueError):
    """An operation was called with arguments it is not defined for."""


class InvalidResidueError(PreconditionError):
    """A residue does not satisfy `0 <= value < modulus`."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"Invalid residue: {value} (mod {modulus})")
        self.value = value
        self.modulus = modulus


class ModulusMismatchError(PreconditionError):
    """Two residues of different moduli were combined."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Residues have different moduli: {left} != {right}")
        self.left = left
        self.right = right


class WidthError(PreconditionError):
    """An integer does not fit the fixed integer width."""


class NotPrimeError(PreconditionError):
    """A prime modulus was required."""


class NotInvertibleError(PreconditionError):
    """The residue is not a unit, so it has no multiplicative inverse."""

    def __init__(self, value: int, modulus: int, divisor: int) -> None:
        super().__init__(f"{value} is not invertible modulo {modulus} (common divisor {divisor})")
        self.value = value
        self.modulus = modulus
        self.divisor = divisor


class SearchExhaustedError(ResidueError, RuntimeError):
    """A randomized search gave up after its iteration cap."""
