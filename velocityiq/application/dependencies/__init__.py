"""Dependency suggestion application layer."""

from velocityiq.application.dependencies.dto import DependencyResponse
from velocityiq.application.dependencies.use_case import DependencyUseCase

__all__ = [
    "DependencyResponse",
    "DependencyUseCase",
]
