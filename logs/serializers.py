# logs/serializers.py
from rest_framework import serializers
from .models import ActivityLog

class ActivityLogSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source='user.username', read_only=True)
    relatedModel = serializers.CharField(source='related_model', read_only=True)
    relatedId = serializers.CharField(source='related_id', read_only=True)

    class Meta:
        model = ActivityLog
        fields = ['id', 'timestamp', 'user', 'note', 'relatedModel', 'relatedId']
