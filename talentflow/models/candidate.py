"""
Candidate model.

Represents a job candidate being tracked through the hiring pipeline.
Candidates have no secondary key; they are addressed by id only.
"""

from talentflow.models.base_model import DocumentModel


class CandidateRecord(DocumentModel):
    """Candidate table - personal info, stage and stage history."""

    __tablename__ = "candidates"
