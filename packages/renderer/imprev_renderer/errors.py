"""Error kinds raised while loading, fitting, and drawing frames."""

from __future__ import annotations


class ImprevError(Exception):
    """Base class for all imprev failures."""


class ArgumentError(ImprevError, ValueError):
    pass


class DecodeError(ImprevError, ValueError):
    pass


class EmptyImageError(DecodeError):
    pass


class TerminalQueryError(ImprevError, OSError):
    pass


class FrameBuildError(ImprevError, RuntimeError):
    pass
