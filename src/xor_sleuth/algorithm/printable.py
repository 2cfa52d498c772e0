PRINTABLE_MIN = 0x20  # space
PRINTABLE_MAX = 0x7E  # tilde
PLACEHOLDER = "_"


def is_printable(byte: int) -> bool:
    return PRINTABLE_MIN <= byte <= PRINTABLE_MAX


def count_non_printable(buffer: bytes, key: int) -> int:
    """Count the bytes that fall outside printable ASCII when decoded with key."""
    error_count = 0
    for b in buffer:
        if not is_printable(b ^ key):
            error_count += 1
    return error_count


def printable_text(buffer: bytes, key: int, placeholder: str = PLACEHOLDER) -> str:
    """Decode buffer with key, substituting the placeholder for non-printable bytes."""
    return "".join(
        chr(b ^ key) if is_printable(b ^ key) else placeholder
        for b in buffer
    )
