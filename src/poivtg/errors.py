"""Error taxonomy for the poi-vtg core.

All failures are synchronous. Three families:
- InputValidationError: the caller passed something the engine cannot use
- ClassificationAmbiguityError: a state falls outside the discrete VTG vocabulary
- GenerationInvariantError: the generator's self-check failed (a defect)
"""


class PoiVTGError(Exception):
    """Base class for all poi-vtg errors."""


class InputValidationError(PoiVTGError, ValueError):
    """Non-finite, out-of-range or malformed input at a call site."""


class ClassificationAmbiguityError(PoiVTGError, ValueError):
    """Angular relation lies outside the tolerance of every VTG bucket.

    Expected and recoverable: callers typically use it to hide a
    "named pattern" indicator.
    """


class GenerationInvariantError(PoiVTGError, AssertionError):
    """Generated state failed to re-classify to its own descriptor."""
