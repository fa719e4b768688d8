from rest_framework import serializers
from .models import Bird, HealthRecord


class BirdSerializer(serializers.ModelSerializer):
    """Main serializer for birds."""

    age_years = serializers.IntegerField(read_only=True)

    class Meta:
        model = Bird
        fields = [
            'id',
            'ring_number',
            'name',
            'species',
            'subspecies',
            'gender',
            'color_mutation',
            'birth_date',
            'age_years',
            'origin',
            'status',
            'aviary_id',
            'father_id',
            'mother_id',
            'image_uri',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class BirdListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    class Meta:
        model = Bird
        fields = [
            'id',
            'ring_number',
            'name',
            'species',
            'gender',
            'birth_date',
            'status',
            'aviary_id',
        ]
        read_only_fields = fields


class ParentsSerializer(serializers.Serializer):
    father = BirdListSerializer(allow_null=True)
    mother = BirdListSerializer(allow_null=True)


class RingNumberConflictSerializer(serializers.Serializer):
    bird = BirdListSerializer()
    score = serializers.IntegerField()
    match_type = serializers.CharField()


class HealthRecordSerializer(serializers.ModelSerializer):
    """Serializer for health records."""

    class Meta:
        model = HealthRecord
        fields = [
            'id',
            'bird_id',
            'date',
            'type',
            'description',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


def pedigree_data(node):
    """Render a pedigree tree from get_pedigree() as plain data."""
    if node is None:
        return None
    return {
        'bird': BirdListSerializer(node['bird']).data,
        'father': pedigree_data(node['father']),
        'mother': pedigree_data(node['mother']),
    }
