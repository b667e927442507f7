"""API-layer dependency functions.

Re-exports all dependency factories from ``app.dependencies`` so that
endpoint modules only need to import from ``app.api.deps``.
"""

from app.dependencies import (
    # Request context
    get_organization_id,
    get_clock,
    # Repository factories
    get_follow_up_repo,
    get_enquiry_repo,
    get_directory_repo,
    # Service factories
    get_taskboard_service,
    get_status_transition_handler,
)

__all__ = [
    "get_organization_id",
    "get_clock",
    "get_follow_up_repo",
    "get_enquiry_repo",
    "get_directory_repo",
    "get_taskboard_service",
    "get_status_transition_handler",
]
