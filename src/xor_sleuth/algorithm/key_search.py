import sys
from typing import Callable, List, Optional

import structlog

from xor_sleuth.algorithm.printable import count_non_printable, printable_text
from xor_sleuth.algorithm.scorer import vector_angle
from xor_sleuth.errors import DegenerateInputError, NoCandidateError
from xor_sleuth.log_config import ensure_logging
from xor_sleuth.models.frequency_vector import ENGLISH_PROFILE, FrequencyVector, build_histogram
from xor_sleuth.models.search_outcome import KeyDiagnostic, SearchOutcome
from xor_sleuth.utils import xor_bytes

KEY_SPACE = 256

ensure_logging()
log = structlog.get_logger()

KeyReportFn = Callable[[KeyDiagnostic], None]


def brute_force(
    ciphertext: bytes,
    allowable_errors: int = 1,
    *,
    ignore_errors: bool = False,
    profile: FrequencyVector = ENGLISH_PROFILE,
    on_key: Optional[KeyReportFn] = None,
) -> SearchOutcome:
    """
    Try every single-byte key against the ciphertext.
    - A key is scored only if its decode has fewer than allowable_errors
      non-printable bytes. ignore_errors scores every key.
    - The key whose decode is the smallest angle from the profile wins.
      Keys are tried in ascending order and only a strictly smaller angle
      replaces the best, so the lowest key wins ties.
    Raises DegenerateInputError for an empty ciphertext and NoCandidateError
    when no key passes the filter.
    """
    if not ciphertext:
        raise DegenerateInputError("Ciphertext is empty; there is nothing to score")

    if ignore_errors:
        allowable_errors = len(ciphertext) + 1

    log.info("searching", ciphertext_len=len(ciphertext), allowable_errors=allowable_errors)

    best_angle = sys.float_info.max
    best_key: Optional[int] = None
    diagnostics: List[KeyDiagnostic] = []

    for key in range(KEY_SPACE):
        bad_byte_cnt = count_non_printable(ciphertext, key)

        if bad_byte_cnt < allowable_errors:
            decoded = printable_text(ciphertext, key)
            angle = vector_angle(build_histogram(ciphertext, key), profile)
            diagnostic = KeyDiagnostic(key, bad_byte_cnt, decoded, angle)
            log.debug("key scored", key=f"{key:02x}", errors=bad_byte_cnt, angle=angle)
            if angle < best_angle:
                best_angle = angle
                best_key = key
        else:
            diagnostic = KeyDiagnostic(key, bad_byte_cnt)
            log.debug("key filtered", key=f"{key:02x}", errors=bad_byte_cnt)

        diagnostics.append(diagnostic)
        if on_key is not None:
            on_key(diagnostic)

    if best_key is None:
        log.warning("no candidate key", allowable_errors=allowable_errors)
        raise NoCandidateError(allowable_errors, tuple(diagnostics))

    log.info("best key", key=f"{best_key:02x}", angle=best_angle)
    return SearchOutcome(
        key=best_key,
        angle=best_angle,
        plaintext=xor_bytes(ciphertext, best_key),
        text=printable_text(ciphertext, best_key),
        allowable_errors=allowable_errors,
        diagnostics=tuple(diagnostics),
    )
