"""
randpass.generator
Random password builder: character pool assembly, exclusion and drawing.
"""

import enum
import random
import string
from dataclasses import dataclass
from typing import Optional, Union


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+~`|}{[]\\:;?><,./-="

DEFAULT_LENGTH = 12

INVALID_LENGTH_MESSAGE = "Password length must be a number greater than 0."
EMPTY_POOL_MESSAGE = (
    "No characters available after exclusion. "
    "Please check your exclusion list or include more character types."
)

_sysrand = random.SystemRandom()


class FailureKind(enum.Enum):
    INVALID_LENGTH = "invalid_length"
    EMPTY_POOL = "empty_pool"


@dataclass(frozen=True)
class Generated:
    password: str

    @property
    def ok(self) -> bool:
        return True

    @property
    def text(self) -> str:
        return self.password


@dataclass(frozen=True)
class GenerationFailure:
    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return self.message


GenerationResult = Union[Generated, GenerationFailure]


def is_valid_length(length) -> bool:
    # bool is an int subclass; True must not pass as a length of 1
    return isinstance(length, int) and not isinstance(length, bool) and length >= 1


def build_pool(
    include_uppercase: bool,
    include_lowercase: bool,
    include_number: bool,
    include_symbol: bool,
    exclude_characters: str = "",
) -> str:
    """
    Concatenate the enabled classes (uppercase, lowercase, digits, symbols, in
    that order) and drop every character found in ``exclude_characters``.

    Exclusion is plain membership, so characters such as ``.`` or ``]`` only
    ever remove themselves.
    """
    characters = ""
    if include_uppercase:
        characters += UPPERCASE
    if include_lowercase:
        characters += LOWERCASE
    if include_number:
        characters += DIGITS
    if include_symbol:
        characters += SYMBOLS

    excluded = set(exclude_characters or "")
    return "".join(c for c in characters if c not in excluded)


def build(
    include_uppercase: bool,
    include_lowercase: bool,
    include_number: bool,
    include_symbol: bool,
    length: int = DEFAULT_LENGTH,
    exclude_characters: str = "",
    rng: Optional[random.Random] = None,
) -> GenerationResult:
    """
    Build a password of ``length`` characters drawn with replacement from the
    pool. Invalid input is reported as a GenerationFailure, never raised.

    Pass a seeded ``random.Random`` as ``rng`` for reproducible output.
    """
    if not is_valid_length(length):
        return GenerationFailure(FailureKind.INVALID_LENGTH, INVALID_LENGTH_MESSAGE)

    pool = build_pool(
        include_uppercase,
        include_lowercase,
        include_number,
        include_symbol,
        exclude_characters,
    )
    if not pool:
        return GenerationFailure(FailureKind.EMPTY_POOL, EMPTY_POOL_MESSAGE)

    rng = rng or _sysrand
    return Generated("".join(rng.choice(pool) for _ in range(length)))


def build_password(
    include_uppercase: bool,
    include_lowercase: bool,
    include_number: bool,
    include_symbol: bool,
    length: int = DEFAULT_LENGTH,
    exclude_characters: str = "",
    rng: Optional[random.Random] = None,
) -> str:
    """Same as build(), flattened to the text shown to the user."""
    return build(
        include_uppercase,
        include_lowercase,
        include_number,
        include_symbol,
        length,
        exclude_characters,
        rng,
    ).text
