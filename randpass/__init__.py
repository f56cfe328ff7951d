"""randpass: random password generator."""

from .generator import build, build_password, Generated, GenerationFailure, FailureKind

__all__ = ["build", "build_password", "Generated", "GenerationFailure", "FailureKind"]
