#!/usr/bin/env python3
"""
Pseudo-prime key pair generator – FIPS 186-4 B.3.1/B.3.3 style primes from a
seeded PRNG.

Usage:
  Interactive (prompts for key size, seed and exponent):
    python keygen_cli.py

  Non-interactive:
    python keygen_cli.py --bits 2048 --seed 12345 --exponent 65537
    python keygen_cli.py --bits 3072 --time-seed --random-exponent --self-test
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
import textwrap
import time
from typing import Callable, Optional, Sequence, TextIO

# Ensure relative repo imports work even if executed from another directory.
sys.path.insert(0, str(pathlib.Path(__file__).parent.resolve()))

from fips_keygen.errors import KeyGenerationError
from fips_keygen.keypair import KeyPair, generate_key_pair
from fips_keygen.parameters import resolve_parameters
from utils import console_ui

logger = logging.getLogger("keygen_cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def report(keypair: KeyPair) -> None:
    """Print e, both primes (decimal and binary) and d, in that order."""

    console_ui.section("Key pair")
    console_ui.big_number("The exponent e is", keypair.e)
    console_ui.big_number("The first pseudo-prime is", keypair.p)
    console_ui.big_number("In binary it is", keypair.p, base=2)
    console_ui.big_number("The second pseudo-prime is", keypair.q)
    console_ui.big_number("In binary it is", keypair.q, base=2)
    console_ui.big_number("The exponent d is", keypair.d)
    if keypair.d_too_small:
        console_ui.warning("WARNING: Exponent too small")


def _run_self_test(keypair: KeyPair, stream: Optional[TextIO] = None) -> None:
    from fips_keygen.selftest import verify_key_pair

    result = verify_key_pair(keypair)
    if result.ok:
        console_ui.success(f"Self-test passed: {result.detail}", stream)
    else:
        console_ui.warning(f"Self-test failed: {result.detail}")


def _export_dashboard(keypair: KeyPair, path: str, stream: Optional[TextIO] = None) -> None:
    from reports.generation_dashboard import make_generation_dashboard
    from utils.plotting import HAS_MPL

    if not HAS_MPL:
        console_ui.warning("matplotlib is not installed; skipping dashboard export.")
        return
    saved = make_generation_dashboard(keypair, path)
    console_ui.success(f"Dashboard saved to {pathlib.Path(saved).resolve()}", stream)


def _prompt_on(stream: TextIO, input_fn: Callable[[str], str]) -> Callable[[str], str]:
    def ask(prompt: str = "") -> str:
        stream.write(prompt)
        stream.flush()
        return input_fn("")

    return ask


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Generate two pseudo primes and a matching e/d exponent pair.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
        Anything not given on the command line is prompted for.

        Exit status: 0 on success (an undersized d is only a warning),
        1 when no prime or no private exponent could be found, 2 on usage
        errors, including key sizes below 4 bits.

        Examples:
          python keygen_cli.py
          python keygen_cli.py --bits 512 --seed 12345 --exponent 65537
          python keygen_cli.py --bits 2048 --time-seed --random-exponent
        """),
    )
    ap.add_argument("--bits", type=int, help="Even key size nlen (2048 or 3072 recommended).")
    seed = ap.add_mutually_exclusive_group()
    seed.add_argument("--seed", type=int, help="Seed for the pseudorandom generator.")
    seed.add_argument("--time-seed", action="store_true", help="Seed with the current time.")
    exponent = ap.add_mutually_exclusive_group()
    exponent.add_argument("--exponent", "-e", type=int, help="Fixed public exponent e.")
    exponent.add_argument(
        "--random-exponent",
        action="store_true",
        help="Sample an odd e with 2^16 <= e <= 2^256.",
    )
    ap.add_argument("--self-test", action="store_true", help="Validate the key pair with pycryptodome.")
    ap.add_argument("--dashboard", metavar="PATH", help="Save a PNG of the rejection statistics.")
    ap.add_argument("--json", action="store_true", help="Print the key pair as JSON instead of text.")
    ap.add_argument("--plain", action="store_true", help="Disable colors/banners; print plain ASCII.")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default WARNING).",
    )
    return ap.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    console_ui.init(plain=args.plain or args.json)
    if not args.json:
        console_ui.banner("Pseudo Primes")

    # With --json, stdout carries only the JSON document; everything else goes to stderr.
    side_stream = sys.stderr if args.json else None
    ask = _prompt_on(sys.stderr, input_fn) if args.json else input_fn
    try:
        params = resolve_parameters(
            bits=args.bits,
            seed=args.seed,
            time_seed=args.time_seed,
            exponent=args.exponent,
            random_exponent=args.random_exponent,
            input_fn=ask,
            stream=side_stream,
        )
    except (ValueError, EOFError) as exc:
        console_ui.error(f"Invalid input: {exc}")
        return EXIT_USAGE

    start = time.perf_counter()
    try:
        keypair = generate_key_pair(params.nlen, params.seed, params.exponent)
    except KeyGenerationError as exc:
        logger.debug("Generation aborted", exc_info=True)
        console_ui.error(f"### FAILURE: {exc}")
        return EXIT_FAILURE
    except ValueError as exc:
        # Widths too small to hold a prime are a usage error, not a failed search.
        console_ui.error(f"Invalid key size {params.nlen}: {exc}")
        return EXIT_USAGE
    seconds = time.perf_counter() - start

    if args.json:
        print(json.dumps(keypair.as_dict(), indent=2))
    else:
        report(keypair)
        console_ui.line()
        console_ui.elapsed("Generated in", seconds)

    if args.self_test:
        _run_self_test(keypair, side_stream)
    if args.dashboard:
        _export_dashboard(keypair, args.dashboard, side_stream)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
