"""
Error taxonomy for the ranking engine.

Every error here is a caller/data error: none of them is transient and
nothing in the engine retries. They surface synchronously to whoever
triggered the operation; the CLI or the HTTP layer decides whether to
abort or skip the offending profile.
"""

from __future__ import annotations

from typing import Iterable


class ArchetypeError(Exception):
    """Base exception for all engine errors."""

    code = "ARCHETYPE_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class MalformedRecordError(ArchetypeError):
    """A raw record is missing its name or carries a non-numeric facet."""

    code = "MALFORMED_RECORD"

    def __init__(self, message: str, record_index: int | None = None):
        if record_index is not None:
            message = f"record {record_index}: {message}"
        super().__init__(message)
        self.record_index = record_index


class ZeroMagnitudeVectorError(ArchetypeError):
    """Normalization (or a cosine) was attempted on an all-zero vector."""

    code = "ZERO_MAGNITUDE_VECTOR"

    def __init__(self, name: str):
        super().__init__(f"vector of {name!r} has a magnitude of 0")
        self.name = name


class FacetKeyMismatchError(ArchetypeError):
    """Two entities were compared with non-identical facet key sets."""

    code = "FACET_KEY_MISMATCH"

    def __init__(
        self,
        left: str,
        right: str,
        missing: Iterable[str] = (),
        extra: Iterable[str] = (),
    ):
        self.left = left
        self.right = right
        self.missing = sorted(missing)
        self.extra = sorted(extra)

        parts = []
        if self.missing:
            parts.append(f"missing from {right!r}: {', '.join(self.missing)}")
        if self.extra:
            parts.append(f"missing from {left!r}: {', '.join(self.extra)}")
        detail = "; ".join(parts) or "facet key sets differ"
        super().__init__(f"cannot compare {left!r} with {right!r} ({detail})")


class DegenerateAngleError(ArchetypeError):
    """Angular distance hit a zero angle under the 'error' policy."""

    code = "DEGENERATE_ANGLE"

    def __init__(self, profile: str, archetype: str):
        super().__init__(
            f"angle between {profile!r} and {archetype!r} is 0; "
            "angular distance is undefined"
        )
        self.profile = profile
        self.archetype = archetype
