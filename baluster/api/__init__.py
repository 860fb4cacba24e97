from .calculate import (
    INVALID_SPAN_MESSAGE,
    INVALID_THICKNESS_MESSAGE,
    MISSING_THICKNESS_MESSAGE,
    SUPPORTED_INPUT_EXAMPLES,
    calculate,
    short_span_message,
)

__all__ = [
    "calculate",
    "short_span_message",
    "SUPPORTED_INPUT_EXAMPLES",
    "INVALID_SPAN_MESSAGE",
    "MISSING_THICKNESS_MESSAGE",
    "INVALID_THICKNESS_MESSAGE",
]
