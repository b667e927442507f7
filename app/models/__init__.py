from app.models.base import Base
from app.models.follow_up import FollowUp
from app.models.enquiry import Enquiry
from app.models.member import Member
from app.models.staff import Staff

# Import event listeners to register them
from app.models import listeners  # noqa: F401

__all__ = [
    "Base",
    "FollowUp",
    "Enquiry",
    "Member",
    "Staff",
]
