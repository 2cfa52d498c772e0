import math

from xor_sleuth.errors import DegenerateVectorError, DimensionMismatchError
from xor_sleuth.models.frequency_vector import FrequencyVector

# Subtracted from the cosine before acos(). With non-negative components the
# cosine is in (0, 1], and round-off can push identical vectors just above 1.
ACOS_EPSILON = 0.0000001


def stable_acos(cosine: float) -> float:
    """acos() of the cosine less ACOS_EPSILON. Not a clamp: keeps the original output."""
    return math.acos(cosine - ACOS_EPSILON)


def dot_product(vector1: FrequencyVector, vector2: FrequencyVector) -> float:
    return float(sum(a * b for a, b in zip(vector1.counts, vector2.counts)))


def vector_angle(vector1: FrequencyVector, vector2: FrequencyVector) -> float:
    """Angle in radians between two frequency vectors. 0 means same direction.

    Raises DimensionMismatchError when the vectors differ in size and
    DegenerateVectorError when either has zero magnitude.
    """
    if len(vector1) != len(vector2):
        raise DimensionMismatchError(len(vector1), len(vector2))

    if vector1.sum_of_squares == 0 or vector2.sum_of_squares == 0:
        raise DegenerateVectorError("Cannot take the angle of a zero-magnitude vector")

    mag_a = math.sqrt(vector1.sum_of_squares)
    mag_b = math.sqrt(vector2.sum_of_squares)
    z = dot_product(vector1, vector2) / (mag_a * mag_b)
    return stable_acos(z)
