"""
Evidence Vault Use Cases
"""

from .preserve_evidence_use_case import PreserveEvidenceUseCase
from .list_evidence_use_case import GetEvidenceStatsUseCase, ListEvidenceUseCase

__all__ = [
    "PreserveEvidenceUseCase",
    "ListEvidenceUseCase",
    "GetEvidenceStatsUseCase",
]
