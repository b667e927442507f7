from datetime import datetime, timezone

from sqlalchemy import event

from app.models.follow_up import FollowUp


# Auto updated_at
@event.listens_for(FollowUp, "before_update")
def update_timestamp(mapper, connection, target):
    target.updated_at = datetime.now(timezone.utc)
