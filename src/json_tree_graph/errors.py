"""Exceptions raised at the input boundary.

The tree builder, normalizer and matcher are total and raise nothing of
their own; only turning raw text into a JSON value can fail.
"""

from __future__ import annotations

__all__ = ["JsonInputError"]


class JsonInputError(ValueError):
    """Raised when input text is blank or is not valid JSON.

    The message is suitable for showing to the user as is.
    """
