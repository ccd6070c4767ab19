"""Domain errors.

Why a dedicated module:
- Adapters and services raise the same taxonomy without importing each other.
- Callers (CLI, tests) catch a single base class when they don't care which.

Notes:
- Record construction is validated by Pydantic, so `ValidationError` is
  Pydantic's own exception re-exported here.
- Filesystem failures are not wrapped: they surface as the builtin `OSError`.
"""

from __future__ import annotations

from pydantic import ValidationError

__all__ = ["FormatError", "InvalidArgumentError", "ValidationError", "ZooError"]


class ZooError(Exception):
    """Base class for errors raised by the registry core itself."""


class FormatError(ZooError, ValueError):
    """Persisted data is malformed or carries an unknown discriminator."""


class InvalidArgumentError(ZooError, TypeError):
    """A required argument was absent (`None`)."""
