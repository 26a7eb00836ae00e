"""
Proof and Tree Models

Pydantic models for hex-encoded proofs and tree summaries.
"""

from .proof_models import ProofModel, TreeSummary

__all__ = [
    "ProofModel",
    "TreeSummary",
]
