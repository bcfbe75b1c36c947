import bleach
from rest_framework import serializers


def clean_text(value) -> str:
    return bleach.clean((value or '').strip(), strip=True)


class AuditFieldsMixin(serializers.Serializer):
    """camelCase read-only audit timestamps shared by every entity."""
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)


class DeleteLogicSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.BooleanField()


class ListQuerySerializer(serializers.Serializer):
    active = serializers.BooleanField(required=False, allow_null=True, default=None)
    page = serializers.IntegerField(required=False, min_value=1)
    pageSize = serializers.IntegerField(required=False, min_value=1, max_value=200)
