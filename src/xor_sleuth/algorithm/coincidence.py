from typing import Tuple

from xor_sleuth.errors import DegenerateInputError
from xor_sleuth.models.frequency_vector import build_histogram


def index_of_coincidence(buffer: bytes) -> Tuple[int, float]:
    """
    Index of coincidence of the raw bytes in buffer.
    Returns (N, ic) where ic = sum(f * (f - 1)) / (N * (N - 1)).
    """
    n = len(buffer)
    if n < 2:
        raise DegenerateInputError(f"Index of coincidence needs at least 2 bytes, got {n}")

    frequencies = build_histogram(buffer)
    total = sum(freq * (freq - 1) for freq in frequencies.counts)
    return n, total / (n * (n - 1))


def format_coincidence(n: int, ic: float) -> str:
    return f"{n}\t{ic:.5f}"
