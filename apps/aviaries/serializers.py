from rest_framework import serializers
from .models import Aviary


class AviarySerializer(serializers.ModelSerializer):
    """Aviary detail and create/update input."""

    location = serializers.CharField(max_length=200)
    capacity = serializers.IntegerField(
        min_value=1,
        error_messages={
            'invalid': 'Capacity must be a number',
            'min_value': 'Capacity must be at least 1',
        }
    )

    class Meta:
        model = Aviary
        fields = [
            'id',
            'name',
            'location',
            'capacity',
            'description',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class AviaryOccupancySerializer(serializers.Serializer):
    aviary_id = serializers.UUIDField()
    capacity = serializers.IntegerField()
    bird_count = serializers.IntegerField()
    free_places = serializers.IntegerField()
    over_capacity = serializers.BooleanField()
