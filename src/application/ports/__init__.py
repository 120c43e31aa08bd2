"""Application ports package."""

from .database import DatabaseEnginePort
from .entries_repository import EntriesRepositoryPort
from .identity import AuthenticatedUser, IdentityPort
from .snapshots_repository import SnapshotsRepositoryPort

__all__ = [
    "AuthenticatedUser",
    "DatabaseEnginePort",
    "EntriesRepositoryPort",
    "IdentityPort",
    "SnapshotsRepositoryPort",
]
