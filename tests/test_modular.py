# pylint: disable=missing-module-docstring,protected-access
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import itertools

import pytest
import sympy

from residues import integer
from residues.exceptions import InvalidResidueError
from residues.exceptions import ModulusMismatchError
from residues.exceptions import NotInvertibleError
from residues.exceptions import NotPrimeError
from residues.exceptions import PreconditionError
from residues.exceptions import SearchExhaustedError
from residues.exceptions import WidthError
from residues.modular import Residue

MODULI = [1, 2, 4, 11, 12, 997]
PRIMES = [2, 3, 5, 7, 11, 13, 101, 997, 2677]


def elements(modulus):
    return [Residue(v, modulus) for v in range(min(modulus, 40))]


@pytest.mark.parametrize("n,modulus,expected", [(0, 4, 0), (3, 4, 3), (4, 4, 0), (27, 4, 3), (5, 1, 0),
                                                (integer.UNSIGNED_MAX, 2**64, 2**64 - 1)])
def test_from_unsigned_integer(n, modulus, expected):
    r = Residue.from_unsigned_integer(n, modulus)
    assert r.value == expected
    assert r.modulus == modulus
    assert r.value < r.modulus


@pytest.mark.parametrize("n,modulus,expected", [(-1, 4, 3), (-4, 4, 0), (-5, 4, 3), (-27, 11, 6), (7, 11, 7),
                                                (integer.SIGNED_MIN, 3, 1)])
def test_from_signed_integer_is_euclidean(n, modulus, expected):
    r = Residue.from_signed_integer(n, modulus)
    assert r.value == expected
    assert 0 <= r.value < modulus


@pytest.mark.parametrize("n,modulus", [(-1, 4), (integer.UNSIGNED_MAX + 1, 4), (1, integer.UNSIGNED_MAX + 1)])
def test_from_unsigned_integer_width(n, modulus):
    with pytest.raises(WidthError):
        Residue.from_unsigned_integer(n, modulus)


@pytest.mark.parametrize("n", [integer.SIGNED_MIN - 1, integer.SIGNED_MAX + 1])
def test_from_signed_integer_width(n):
    with pytest.raises(WidthError):
        Residue.from_signed_integer(n, 11)


def test_zero_modulus_rejected():
    with pytest.raises(PreconditionError):
        Residue.from_unsigned_integer(3, 0)
    with pytest.raises(PreconditionError):
        Residue.from_signed_integer(-3, 0)


def test_residue_is_immutable():
    r = Residue.from_unsigned_integer(3, 4)
    with pytest.raises(AttributeError):
        r.value = 2
    with pytest.raises(AttributeError):
        r.extra = 1


def test_structural_equality():
    assert Residue.from_unsigned_integer(3, 4) == Residue.from_signed_integer(-1, 4)
    assert Residue.from_unsigned_integer(3, 4) != Residue.from_unsigned_integer(3, 5)
    assert Residue(3, 4) != 3
    assert len({Residue(3, 4), Residue.from_signed_integer(-1, 4), Residue(3, 5)}) == 2
    assert repr(Residue(3, 4)) == "Residue(value=3, modulus=4)"
    assert int(Residue(3, 4)) == 3


@pytest.mark.parametrize("invalid", [Residue(4, 4), Residue(5, 4), Residue(-1, 4), Residue(0, 0),
                                     Residue(0, integer.UNSIGNED_MAX + 1)])
def test_invalid_residue_fails_fast(invalid):
    valid = Residue(1, 4)
    operations = [
        lambda: invalid.plus(valid),
        lambda: valid.plus(invalid),
        lambda: invalid.times(valid),
        lambda: valid.times(invalid),
        lambda: invalid.scalar_times(2),
        invalid.neg,
        invalid.inv,
        lambda: invalid.pow(3),
        invalid.is_unit,
    ]
    for op in operations:
        with pytest.raises(InvalidResidueError):
            op()


def test_mismatched_moduli():
    a, b = Residue(1, 4), Residue(1, 5)
    with pytest.raises(ModulusMismatchError, match="4 != 5"):
        a.plus(b)
    with pytest.raises(ModulusMismatchError):
        a.times(b)
    with pytest.raises(ModulusMismatchError):
        a + b


def test_small_ring_arithmetic():
    three, two = Residue(3, 4), Residue(2, 4)
    assert three.plus(two) == Residue(1, 4)
    assert three.times(two) == Residue(2, 4)
    assert three.scalar_times(1) == three
    assert three.scalar_times(2) == Residue(2, 4)
    assert three.scalar_times(-1) == Residue(1, 4)
    assert three.neg() == three.scalar_times(-1)


@pytest.mark.parametrize("modulus", MODULI)
def test_ring_laws(modulus):
    elems = elements(modulus)[:12]
    for a, b in itertools.product(elems, repeat=2):
        assert a.plus(b) == b.plus(a)
        assert a.times(b) == b.times(a)
        assert a.plus(b).value < modulus
        assert a.times(b).value < modulus
    for a, b, c in itertools.product(elems[:6], repeat=3):
        assert a.plus(b.plus(c)) == a.plus(b).plus(c)
        assert a.times(b.times(c)) == a.times(b).times(c)
        assert a.times(b.plus(c)) == a.times(b).plus(a.times(c))


@pytest.mark.parametrize("modulus", MODULI)
def test_negation(modulus):
    zero = Residue.from_unsigned_integer(0, modulus)
    for a in elements(modulus):
        assert a.plus(a.neg()) == zero


@pytest.mark.parametrize("scalar", [-(2**100), -13, -1, 0, 1, 5, 2**100, integer.SIGNED_MAX])
def test_scalar_times(scalar):
    a = Residue(7, 997)
    assert a.scalar_times(scalar) == Residue.from_signed_integer(7 * scalar % 997, 997)


def test_scalar_times_width():
    with pytest.raises(WidthError):
        Residue(1, 4).scalar_times(integer.SIGNED_MAX + 1)


@pytest.mark.parametrize("modulus", MODULI)
def test_inverse_law(modulus):
    one = Residue.from_unsigned_integer(1, modulus)
    for a in elements(modulus):
        if integer.gcd(a.value, modulus) == 1:
            assert a.is_unit()
            assert a.times(a.inv()) == one
            if modulus > 1:
                assert a.inv().value == pow(a.value, -1, modulus)
        else:
            assert not a.is_unit()
            with pytest.raises(NotInvertibleError):
                a.inv()


def test_inverses_mod_eleven():
    expected = [1, 6, 4, 3, 9, 2, 8, 7, 5, 10]
    assert [Residue.from_signed_integer(i, 11).inv().value for i in range(1, 11)] == expected


def test_not_invertible_details():
    with pytest.raises(NotInvertibleError) as exc:
        Residue(6, 15).inv()
    assert exc.value.divisor == 3
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("modulus", MODULI)
def test_pow_zero(modulus):
    one = Residue.from_unsigned_integer(1, modulus)
    for a in elements(modulus):
        assert a.pow(0) == one


@pytest.mark.parametrize("value,exponent,modulus", [(2, 10, 1000), (3, 996, 997), (5, 2**126, 2677),
                                                    (123456789, 987654321, 2**127 - 1), (0, 5, 7), (0, 3, 1)])
def test_pow_matches_builtin(value, exponent, modulus):
    assert Residue(value, modulus).pow(exponent).value == pow(value, exponent, modulus)


@pytest.mark.parametrize("m,n", [(2, 3), (5, 7), (-3, 4), (-2, -9), (0, 12)])
def test_pow_composes(m, n):
    a = Residue(10, 997)
    assert a.pow(m).pow(n) == a.pow(m * n)


def test_negative_pow():
    a = Residue(10, 997)
    assert a.pow(-1) == a.inv()
    assert a.pow(-5) == a.inv().pow(5)
    assert a.pow(integer.SIGNED_MIN) == a.inv().pow(integer.SIGNED_MAX).times(a.inv())
    with pytest.raises(NotInvertibleError):
        Residue(3, 12).pow(-1)


def test_negative_pow_inverts_once(mocker):
    spy = mocker.spy(Residue, "inv")
    Residue(10, 997).pow(-(2**100))
    assert spy.call_count == 1


def test_pow_width():
    with pytest.raises(WidthError):
        Residue(2, 7).pow(integer.SIGNED_MAX + 1)


def test_operator_sugar():
    a, b = Residue(3, 11), Residue(5, 11)
    assert a + b == a.plus(b)
    assert a * b == a.times(b)
    assert a * -2 == a.scalar_times(-2)
    assert 4 * a == a.scalar_times(4)
    assert -a == a.neg()
    assert a**-3 == a.pow(-3)


@pytest.mark.parametrize("p", PRIMES)
def test_primitive_root_generates(rng, p):
    g = Residue.primitive_root(p, rng)
    assert 1 <= g.value < p
    assert sympy.is_primitive_root(g.value, p)
    one = Residue.from_unsigned_integer(1, p)
    power = g
    for _ in range(1, p - 1):
        assert power != one
        power = power.times(g)
    assert power == one


@pytest.mark.slow
def test_primitive_root_large(rng):
    p = 952252135981
    g = Residue.primitive_root(p, rng)
    assert sympy.is_primitive_root(g.value, p)
    assert g.is_primitive_root()


def test_primitive_root_default_rng():
    assert Residue.primitive_root(997).is_primitive_root()


@pytest.mark.parametrize("modulus", [1, 4, 9, 25, 91, 1000])
def test_primitive_root_rejects_composites(modulus):
    with pytest.raises(NotPrimeError):
        Residue.primitive_root(modulus)


def test_primitive_root_rejects_zero():
    with pytest.raises(PreconditionError):
        Residue.primitive_root(0)


def test_primitive_root_exhausts(mocker, rng):
    # 1 is never a generator modulo 997
    mocker.patch.object(rng, "randrange", return_value=1)
    with pytest.raises(SearchExhaustedError):
        Residue.primitive_root(997, rng, limit=25)
    assert rng.randrange.call_count == 25


@pytest.mark.parametrize("p", [7, 11, 13, 997])
def test_is_primitive_root_matches_sympy(p):
    for v in range(1, min(p, 60)):
        assert Residue(v, p).is_primitive_root() == sympy.is_primitive_root(v, p)
    assert not Residue(0, p).is_primitive_root()


def test_is_primitive_root_needs_prime():
    with pytest.raises(NotPrimeError):
        Residue(3, 10).is_primitive_root()
