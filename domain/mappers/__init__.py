"""
Domain mappers package.
Handles transformation between store documents, domain records and DTOs.
"""

from domain.mappers.participant_mapper import ParticipantMapper

__all__ = ["ParticipantMapper"]
