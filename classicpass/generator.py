"""
classicpass.generator
Random password generator drawing from the system's secure random source.
"""

import logging
from secrets import SystemRandom
from typing import NamedTuple, Optional


LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="

logger = logging.getLogger(__name__)
_sysrand = SystemRandom()


class InvalidLengthError(ValueError):
    """Raised when a password length is negative or not an integer."""


class GenerationOptions(NamedTuple):
    length: int = 12
    include_letters: bool = True
    include_numbers: bool = True
    include_symbols: bool = True


def build_charset(include_letters: bool = True, include_numbers: bool = True, include_symbols: bool = True) -> str:
    pools = []
    if include_letters:
        pools.append(LETTERS)
    if include_numbers:
        pools.append(DIGITS)
    if include_symbols:
        pools.append(SYMBOLS)
    return "".join(pools)


def generate(
    length: int = 12,
    include_letters: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = True,
    rng=None,
) -> str:
    """
    Generate a password of exactly `length` characters.

    Every position is drawn independently from the enabled classes (letters, then digits,
    then symbols). `rng` is any object with a `randrange(n)` method and defaults to
    `secrets.SystemRandom`; its `randrange` rejects out-of-range draws, so every index is
    exactly uniform. With no class enabled the result is "".
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidLengthError("length must be >= 0")

    charset = build_charset(include_letters, include_numbers, include_symbols)
    if not charset:
        logger.info("no character class enabled; returning empty password")
        return ""

    if rng is None:
        rng = _sysrand
    n = len(charset)
    password = "".join(charset[rng.randrange(n)] for _ in range(length))
    logger.debug("generated password of length %d from %d-char charset", length, n)
    return password


def generate_from(options: GenerationOptions, rng=None) -> str:
    """Generate a password for a `GenerationOptions` record."""
    return generate(
        length=options.length,
        include_letters=options.include_letters,
        include_numbers=options.include_numbers,
        include_symbols=options.include_symbols,
        rng=rng,
    )
