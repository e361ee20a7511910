"""The Command Line Interface for the library, printing worked examples of its computations.

Typical usage example:

    residues demo
    residues --seed 7 dh 997
    python -m residues rsa 2677 3217 42 1337
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import random
import sys
import typing

import residues
from residues import diffie_hellman
from residues import elgamal
from residues import rsa
from residues.modular import Residue

DEMO_PAIRS = [(527, 1258), (228, 1056), (163961, 167181), (3892394, 239847)]

number = argparse.ArgumentParser(add_help=False)
number.add_argument("n", type=int, help="The integer to examine.")
prime = argparse.ArgumentParser(add_help=False)
prime.add_argument("modulus", type=int, help="A prime modulus.")
primes = argparse.ArgumentParser(add_help=False)
primes.add_argument("p", type=int, help="First secret prime.")
primes.add_argument("q", type=int, help="Second secret prime.")
units = argparse.ArgumentParser(add_help=False)
units.add_argument("units", type=int, nargs="+", help="Plaintext units, each below the modulus.")

corep = argparse.ArgumentParser(prog="residues")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {residues.__version__}")
corep.add_argument("--verbose", "-V", action="store_true", help="Log search progress")
corep.add_argument("--seed", "-s", type=int, default=None, help="Seed the random source for reproducible runs")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

commands.add_parser("demo", help="Print a tour of the ring arithmetic.")
commands.add_parser("prime", parents=[number], help="Primality test.")
commands.add_parser("factor", parents=[number], help="Prime factorization.")
commands.add_parser("totient", parents=[number], help="Euler's totient.")
gcdp = commands.add_parser("gcd", help="Greatest common divisor with Bezout coefficients.")
gcdp.add_argument("x", type=int)
gcdp.add_argument("y", type=int)
commands.add_parser("root", parents=[prime], help="Find a primitive root.")
commands.add_parser("dh", parents=[prime], help="Run a Diffie-Hellman exchange between two parties.")
commands.add_parser("elgamal", parents=[prime, units], help="Encrypt and decrypt with ElGamal.")
commands.add_parser("rsa", parents=[primes, units], help="Encrypt and decrypt with RSA.")


def demo(prntr: typing.Callable = print) -> None:
    """Walk through the basic operations on small numbers."""
    prntr(f"is 91 prime? {residues.is_prime(91)}")
    modulus, val1, val2 = 4, 3, 2
    res1 = Residue.from_unsigned_integer(val1, modulus)
    res2 = Residue.from_unsigned_integer(val2, modulus)
    prntr(f"working in Z/{modulus}Z:")
    prntr(f"{val1} + {val2} = {res1.plus(res2)!r}")
    prntr(f"{val1} * {val2} = {res1.times(res2)!r}")
    for scalar in (1, 2, -1):
        prntr(f"{scalar} * {val1} = {res1.scalar_times(scalar)!r}")
    prntr(f"-{val1} = {res1.neg()!r}")
    for x, y in DEMO_PAIRS:
        prntr(f"({x}, {y}) -> {residues.gcd_with_coefficients(x, y)}")
    for i in range(1, 11):
        prntr(f"{i}^{{-1}} = {Residue.from_signed_integer(i, 11).inv()!r}")


def run(args: argparse.Namespace, prntr: typing.Callable = print) -> None:
    """Execute the parsed subcommand."""
    rng = random.Random(args.seed) if args.seed is not None else None
    match args.subcommand:
        case "demo":
            demo(prntr)
        case "prime":
            prntr(f"is {args.n} prime? {residues.is_prime(args.n)}")
        case "factor":
            prntr(" * ".join(f"{p}^{k}" for p, k in residues.prime_factorize(args.n)) or "1")
        case "totient":
            prntr(f"phi({args.n}) = {residues.euler_totient(args.n)}")
        case "gcd":
            g, u, v = residues.gcd_with_coefficients(args.x, args.y)
            prntr(f"gcd({args.x}, {args.y}) = {g} = {u} * {args.x} + {v} * {args.y}")
        case "root":
            prntr(f"primitive root mod {args.modulus}: {Residue.primitive_root(args.modulus, rng).value}")
        case "dh":
            base = diffie_hellman.choose_base(args.modulus, rng)
            a_secret, a_shared = diffie_hellman.generate_secret_and_shared_value(base, rng)
            b_secret, b_shared = diffie_hellman.generate_secret_and_shared_value(base, rng)
            prntr(f"base: {base.value}")
            prntr(f"shared values: {a_shared.value}, {b_shared.value}")
            prntr(f"shared secret: {diffie_hellman.compute_shared_secret(a_secret, b_shared).value}, "
                  f"{diffie_hellman.compute_shared_secret(b_secret, a_shared).value}")
        case "elgamal":
            base = elgamal.choose_base(args.modulus, rng)
            private_key, public_key = elgamal.generate_key_pair(base, rng)
            ciphertext = elgamal.encrypt(base, args.units, public_key, rng)
            prntr(f"base: {base.value}, public key: {public_key.value}")
            prntr(f"ciphertext: {[(c1.value, c2.value) for c1, c2 in ciphertext]}")
            prntr(f"decrypted: {elgamal.decrypt(ciphertext, private_key)}")
        case "rsa":
            n, e = rsa.generate_public_key(args.p, args.q, rng)
            ciphertext = rsa.encrypt(args.units, (n, e))
            prntr(f"public key: ({n}, {e})")
            prntr(f"ciphertext: {[c.value for c in ciphertext]}")
            prntr(f"decrypted: {rsa.decrypt(args.p, args.q, ciphertext, e)}")


def main(argv: list[str] | None = None) -> None:
    """Parse the command line and run the requested subcommand."""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        run(args)
    except residues.ResidueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
