"""
Error types raised by interdetect.

Every input problem is reported immediately as a subclass of
``ValueError``, so callers may catch either the specific type or the
builtin one. Undefined (NaN) scores returned by a scoring criterion are
results, not errors, and never raise.

Classes
-------
MissingInputError
    A required matrix or vector argument was not supplied.
ShapeMismatchError
    Row counts of ``X`` and ``y`` disagree, or ``nmain_p`` does not match
    the number of columns of ``X``.
InvalidValueError
    NaN values, or out-of-domain parameters (``nsis``, ``r1``, ``r2``, ``q``).
MissingArtifactError
    The interaction index table was not supplied.
ConsistencyError
    The interaction index table is malformed or does not contain a
    candidate pair.
"""


class MissingInputError(ValueError):
    """Required input is ``None``."""


class ShapeMismatchError(ValueError):
    """Inputs disagree on the number of observations or main effects."""


class InvalidValueError(ValueError):
    """NaN values or out-of-domain parameters."""


class MissingArtifactError(ValueError):
    """The caller-supplied interaction index table is missing."""


class ConsistencyError(ValueError):
    """The interaction index table is inconsistent with its use."""
