class XorSleuthError(RuntimeError):
    pass


class DimensionMismatchError(XorSleuthError):
    """Two frequency vectors don't have the same number of bins."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Vectors not of same dimension: {left} != {right}")
        self.left = left
        self.right = right


class DegenerateVectorError(XorSleuthError):
    """A frequency vector with zero magnitude can't be compared by angle."""


class DegenerateInputError(XorSleuthError):
    """The buffer is too short for the requested statistic."""


class InputFormatError(XorSleuthError):
    pass


class NoCandidateError(XorSleuthError):
    """No key produced a decode that passed the printability filter."""

    def __init__(self, allowable_errors: int, diagnostics: tuple = ()):
        super().__init__(
            f"No key decoded with fewer than {allowable_errors} non-printable bytes"
        )
        self.allowable_errors = allowable_errors
        self.diagnostics = diagnostics
