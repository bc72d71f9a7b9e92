from types import MappingProxyType
from typing import Iterator, Self

from toolz import pipe


class FrequencyTable:
    """Occurrence count of every distinct character of a text."""

    def __init__(self, counts: dict[str, int]) -> None:
        for char, count in counts.items():
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f'Key must be a single character, but got {char!r}')
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise ValueError(f'Count of {char!r} must be a positive integer, but got {count!r}')
        self._counts = MappingProxyType(dict(counts))

    @classmethod
    def build(cls, text: str) -> Self:
        counts: dict[str, int] = {}
        for char in text:
            counts[char] = counts.get(char, 0) + 1
        return cls(counts)

    @property
    def counts(self) -> MappingProxyType:
        return self._counts

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._counts.items())

    def __getitem__(self, char: str) -> int:
        return self._counts[char]

    def __contains__(self, char: object) -> bool:
        return char in self._counts

    def items(self) -> Iterator[tuple[str, int]]:
        return iter(self)

    # Heaviest first, then by character
    def most_common(self) -> list[tuple[str, int]]:
        return pipe(
            self._counts.items(),
            lambda arg: sorted(arg, key=lambda x: (-x[1], x[0])),
            list,
        )

    def __repr__(self) -> str:
        return f"FrequencyTable({dict(self._counts)!r})"
