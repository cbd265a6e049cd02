"""Tech-debt application layer."""

from velocityiq.application.tech_debt.dto import TechDebtResponse
from velocityiq.application.tech_debt.use_case import TechDebtUseCase

__all__ = [
    "TechDebtResponse",
    "TechDebtUseCase",
]
