"""Interactive and command-line sources for the three generation inputs."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .config import RECOMMENDED_KEY_SIZES

InputFn = Callable[[str], str]


@dataclass(frozen=True)
class GenerationParameters:
    nlen: int
    seed: int
    exponent: Optional[int]  # None -> sample e at random


def _parse_int(value: str, *, field: str) -> int:
    text = value.strip()
    try:
        return int(text, 10)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {field}: {text!r}") from exc


def _parse_positive(value: str, *, field: str) -> int:
    number = _parse_int(value, field=field)
    if number <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return number


def _said_yes(answer: str) -> bool:
    return answer.strip()[:1].lower() == "y"


def prompt_key_length(input_fn: InputFn = input, stream: Optional[TextIO] = None) -> int:
    sizes = " or ".join(str(size) for size in RECOMMENDED_KEY_SIZES)
    print(f"Recommended key sizes are {sizes} for pseudo primes", file=stream)
    return _parse_int(input_fn("Enter an even key size (nlen): "), field="key size")


def prompt_seed(
    input_fn: InputFn = input,
    clock: Callable[[], float] = time.time,
    stream: Optional[TextIO] = None,
) -> int:
    print("\n  --> Options for the random seed. <--", file=stream)
    print("      Choose Y to type an integer", file=stream)
    answer = input_fn("      or N to use the current time: ")
    if _said_yes(answer):
        return _parse_int(input_fn("\t Enter the seed: "), field="seed")
    return int(clock())


def prompt_exponent(input_fn: InputFn = input, stream: Optional[TextIO] = None) -> Optional[int]:
    print("\n  --> Options for the exponent e. <--", file=stream)
    print("      Choose Y to type an integer", file=stream)
    answer = input_fn("      or N to calculate a random number: ")
    if _said_yes(answer):
        return _parse_positive(
            input_fn("\t Enter the value of e (often used are 3, 5, 17, 257, 65537): "),
            field="exponent e",
        )
    return None


def resolve_parameters(
    *,
    bits: Optional[int] = None,
    seed: Optional[int] = None,
    time_seed: bool = False,
    exponent: Optional[int] = None,
    random_exponent: bool = False,
    input_fn: InputFn = input,
    clock: Callable[[], float] = time.time,
    stream: Optional[TextIO] = None,
) -> GenerationParameters:
    """Fill in whatever the command line left open by prompting for it.

    Prompt text goes to *stream* (stdout when ``None``).
    """

    nlen = bits if bits is not None else prompt_key_length(input_fn, stream)

    if seed is not None:
        chosen_seed = seed
    elif time_seed:
        chosen_seed = int(clock())
    else:
        chosen_seed = prompt_seed(input_fn, clock, stream)

    if exponent is not None:
        if exponent <= 0:
            raise ValueError("exponent e must be a positive integer")
        chosen_e: Optional[int] = exponent
    elif random_exponent:
        chosen_e = None
    else:
        chosen_e = prompt_exponent(input_fn, stream)

    return GenerationParameters(nlen=nlen, seed=chosen_seed, exponent=chosen_e)


__all__ = [
    "GenerationParameters",
    "prompt_exponent",
    "prompt_key_length",
    "prompt_seed",
    "resolve_parameters",
]
