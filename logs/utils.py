# logs/utils.py
from .models import ActivityLog

def log_activity(user_id, note, related_model=None, related_id=None):
    ActivityLog.objects.create(
        user_id=user_id,
        note=note,
        related_model=related_model,
        related_id=related_id,
    )
