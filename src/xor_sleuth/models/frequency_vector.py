from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

BIN_COUNT = 256


@dataclass(frozen=True, slots=True)
class FrequencyVector:
    """Byte-frequency histogram with its squared magnitude.

    counts[b] is the number of times byte value b occurred. The sum of
    squares is computed once here since every angle computation against
    this vector reuses it.
    """

    counts: Tuple[int, ...]
    sum_of_squares: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "counts", tuple(self.counts))
        object.__setattr__(self, "sum_of_squares", float(sum(c * c for c in self.counts)))

    @property
    def total(self) -> int:
        return sum(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, index: int) -> int:
        return self.counts[index]


def build_histogram(buffer: bytes, key: int = 0) -> FrequencyVector:
    """Count each byte of buffer after XOR with key. All 256 bins are always present."""
    counts = [0] * BIN_COUNT
    for b in buffer:
        counts[b ^ key] += 1
    return FrequencyVector(tuple(counts))


# Byte counts of a fixed English text corpus, indexed by byte value.
# Tab, newline, space, punctuation and both letter cases are represented.
ENGLISH_COUNTS = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 209, 2989, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    17105, 17, 276, 53, 0, 3, 13, 59, 353, 370, 235, 26, 884, 0, 1561, 793,
    310, 228, 187, 92, 61, 51, 66, 59, 82, 73, 384, 10, 75, 402, 86, 7,
    8, 348, 177, 344, 246, 323, 97, 296, 86, 480, 85, 12, 175, 143, 238, 207,
    292, 4, 286, 393, 425, 149, 54, 77, 88, 55, 6, 307, 9, 309, 1, 304,
    0, 5771, 1861, 3353, 2887, 9982, 1769, 2140, 2663, 6190, 290, 494, 4378, 2147, 5410, 6203,
    2120, 78, 5312, 5498, 7266, 2649, 999, 928, 292, 1106, 90, 22, 0, 22, 3, 0,
    0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
)

ENGLISH_PROFILE = FrequencyVector(ENGLISH_COUNTS)
