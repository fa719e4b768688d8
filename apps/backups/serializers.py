"""
Record serializers for account backups.

A backup record is the JSON-safe dict form of one row: every stored field
except owner and updated_at. The same serializers validate records coming
back in through import and restore.
"""

from rest_framework import serializers
from apps.aviaries.models import Aviary
from apps.birds.models import Bird, HealthRecord
from apps.breeding.models import Couple, Nest, Egg


class RecordSerializer(serializers.ModelSerializer):
    """Base for backup records: id and created_at are kept as given."""

    id = serializers.UUIDField()
    created_at = serializers.DateTimeField(required=False)


class AviaryRecordSerializer(RecordSerializer):
    class Meta:
        model = Aviary
        fields = ['id', 'name', 'location', 'capacity', 'description', 'notes', 'created_at']


class BirdRecordSerializer(RecordSerializer):
    class Meta:
        model = Bird
        fields = [
            'id', 'ring_number', 'name', 'species', 'subspecies', 'gender',
            'color_mutation', 'birth_date', 'origin', 'status', 'aviary_id',
            'father_id', 'mother_id', 'image_uri', 'notes', 'created_at',
        ]


class HealthRecordRecordSerializer(RecordSerializer):
    class Meta:
        model = HealthRecord
        fields = ['id', 'bird_id', 'date', 'type', 'description', 'notes', 'created_at']


class CoupleRecordSerializer(RecordSerializer):
    class Meta:
        model = Couple
        fields = ['id', 'male_id', 'female_id', 'season', 'active', 'notes', 'created_at']


class NestRecordSerializer(RecordSerializer):
    class Meta:
        model = Nest
        fields = [
            'id', 'couple_id', 'aviary_id', 'start_date', 'active', 'egg_count',
            'expected_hatch_date', 'actual_hatch_date', 'hatched_count', 'notes',
            'created_at',
        ]


class EggRecordSerializer(RecordSerializer):
    class Meta:
        model = Egg
        fields = ['id', 'nest_id', 'lay_date', 'status', 'hatch_date', 'bird_id', 'notes', 'created_at']


# Collection name -> record serializer, in restore order
RECORD_SERIALIZERS = {
    'aviaries': AviaryRecordSerializer,
    'birds': BirdRecordSerializer,
    'health_records': HealthRecordRecordSerializer,
    'couples': CoupleRecordSerializer,
    'nests': NestRecordSerializer,
    'eggs': EggRecordSerializer,
}

COLLECTIONS = tuple(RECORD_SERIALIZERS)


class ImportSerializer(serializers.Serializer):
    """Body of POST /api/backups/import/: exported JSON or the full text report."""

    data = serializers.JSONField(required=False)
    text = serializers.CharField(required=False, allow_blank=False, trim_whitespace=False)

    def validate(self, attrs):
        if 'data' not in attrs and 'text' not in attrs:
            raise serializers.ValidationError('Provide either data or text')
        return attrs


class CollectionCountsSerializer(serializers.Serializer):
    aviaries = serializers.IntegerField()
    birds = serializers.IntegerField()
    health_records = serializers.IntegerField()
    couples = serializers.IntegerField()
    nests = serializers.IntegerField()
    eggs = serializers.IntegerField()
