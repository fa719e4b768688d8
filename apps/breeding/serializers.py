from rest_framework import serializers
from .models import Couple, Nest, Egg


class CoupleSerializer(serializers.ModelSerializer):
    """Serializer for breeding couples."""

    season = serializers.CharField(max_length=20)

    class Meta:
        model = Couple
        fields = [
            'id',
            'male_id',
            'female_id',
            'season',
            'active',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class NestSerializer(serializers.ModelSerializer):
    """Serializer for nests."""

    class Meta:
        model = Nest
        fields = [
            'id',
            'couple_id',
            'aviary_id',
            'start_date',
            'active',
            'egg_count',
            'expected_hatch_date',
            'actual_hatch_date',
            'hatched_count',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class EggSerializer(serializers.ModelSerializer):
    """Serializer for eggs."""

    class Meta:
        model = Egg
        fields = [
            'id',
            'nest_id',
            'lay_date',
            'status',
            'hatch_date',
            'bird_id',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class HatchInputSerializer(serializers.Serializer):
    """Input for marking a nest as hatched. hatch_date defaults to today."""

    hatched_count = serializers.IntegerField(
        min_value=1,
        error_messages={
            'invalid': 'Enter a valid number',
            'min_value': 'At least one egg must hatch',
        }
    )
    hatch_date = serializers.DateField(required=False)
