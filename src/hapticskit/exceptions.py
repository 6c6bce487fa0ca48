"""
Custom exceptions for HapticsKit.

Gated haptics never raise. These exceptions cover programming errors
and backend bridge failures that a caller explicitly asked for.
"""

from typing import Optional


class HapticsKitError(Exception):
    """Base exception for all HapticsKit errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


class HapticsKitNotConfiguredError(HapticsKitError):
    """The shared facade was used before ``HapticsKit.configure`` was called."""

    def __init__(self, operation: Optional[str] = None):
        detail = f" (attempted: {operation})" if operation else ""
        super().__init__(
            "HapticsKit has not been configured. Call "
            f"HapticsKit.configure(HapticsKitConfiguration(...)) first{detail}",
            recoverable=False,
        )
        self.operation = operation


class HapticBackendError(HapticsKitError):
    """A haptic backend could not be loaded or used."""

    def __init__(self, backend: str, reason: str):
        super().__init__(
            f"Haptic backend '{backend}' unavailable: {reason}", recoverable=True
        )
        self.backend = backend
        self.reason = reason
