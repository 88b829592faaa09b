from rest_framework import serializers

from .models import SmsSubscription


class SmsSubscriptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = SmsSubscription
        fields = ["id", "name", "phone", "created_at"]
        read_only_fields = fields
