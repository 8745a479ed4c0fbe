"""
rummy_score.errors — Custom exception classes
==============================================

Defines the exception hierarchy for score keeping errors.
Persistence errors store full context for structured logging.
"""

from __future__ import annotations
from typing import Optional


class RummyScoreError(Exception):
    """Base exception for all rummy_score package errors."""
    pass


class OutOfRangeError(RummyScoreError, IndexError):
    """Raised when a player or round index is not currently valid."""

    def __init__(self, kind: str, index: int, limit: int):
        self.kind = kind
        self.index = index
        self.limit = limit
        super().__init__(
            f"{kind} index {index} out of range (valid: 0..{limit - 1})"
            if limit > 0
            else f"{kind} index {index} out of range (no {kind}s yet)"
        )


class InvalidTransitionError(RummyScoreError, ValueError):
    """Raised when a game operation is not allowed in the current state."""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Invalid transition: {operation} from {state}")


class EmptyPlayerNameError(RummyScoreError, ValueError):
    """Raised when a player is added without a name."""

    def __init__(self):
        super().__init__("Player name must not be empty")


class PersistenceError(RummyScoreError):
    """Raised by persistence adapters when saving or loading fails."""

    def __init__(
        self,
        operation: str,
        location: str,
        cause: Optional[BaseException] = None,
    ):
        self.operation = operation
        self.location = location
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {operation} game state at {location}{detail}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="PERSISTENCE_FAILURE",
            operation=self.operation,
            location=self.location,
            cause=self.cause,
        )


class ExportError(RummyScoreError):
    """Raised when exported text cannot be written to disk."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write export file {path}: {cause}")


def _format_error_block(
    error_type: str,
    operation: str,
    location: str,
    cause: Optional[BaseException],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " PERSISTENCE ERROR — IN-MEMORY STATE KEPT",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
        f" Location:     {location}",
    ]

    if cause is not None:
        lines.append("")
        lines.append(" ── CAUSE " + "─" * 54)
        lines.append(f" {cause.__class__.__name__}: {cause}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
