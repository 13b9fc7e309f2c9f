import random
from dataclasses import dataclass
from typing import ClassVar, Optional

ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
DEFAULT_SIZE = 21

_ALPHABET_CHARS = frozenset(ALPHABET)


@dataclass(frozen=True)
class NanoID:
    """
    Short URL-safe random identifier.

    Every character of `value` belongs to `ALPHABET`. Generated values are
    NOT cryptographically secure and collisions are not detected.
    """
    value: str

    alphabet: ClassVar[str] = ALPHABET

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValueError(f"NanoID value contains characters outside the alphabet: {self.value!r}")

    @classmethod
    def generate(cls, size: int = DEFAULT_SIZE, rng: Optional[random.Random] = None) -> 'NanoID':
        """Draws `size` characters uniformly, with replacement, from the alphabet."""
        if size < 0:
            raise ValueError(f"NanoID size must be non-negative, got {size}.")
        source = rng if rng is not None else random
        return cls("".join(source.choices(ALPHABET, k=size)))

    @classmethod
    def try_parse(cls, candidate: str) -> Optional['NanoID']:
        """Returns a NanoID wrapping `candidate` unchanged, or None if any character is invalid."""
        if not cls.is_valid(candidate):
            return None
        return cls(candidate)

    @staticmethod
    def is_valid(candidate: str) -> bool:
        if not isinstance(candidate, str):
            return False
        return all(char in _ALPHABET_CHARS for char in candidate)

    @property
    def size(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
