"""Repository layer: all database access goes through here.

Repositories encapsulate SQLAlchemy queries so that the service layer
only contains business logic.
"""

from app.repositories.follow_up_repository import FollowUpRepository
from app.repositories.enquiry_repository import EnquiryRepository
from app.repositories.directory_repository import DirectoryRepository

__all__ = [
    "FollowUpRepository",
    "EnquiryRepository",
    "DirectoryRepository",
]
