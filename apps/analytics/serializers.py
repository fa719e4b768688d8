"""
Serializers for analytics app.

Input Serializers:
    SeasonQuerySerializer - Validates the optional season filter

Response Serializers:
    StatisticsSerializer - Dashboard counters
    SpeciesBreakdownSerializer - Birds per species
    SeasonSummarySerializer - Breeding results per season
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class SeasonQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the season summary.

    Query Parameters:
        season (str): Only summarize this season (e.g. '2025')
    """

    season = serializers.CharField(
        max_length=20,
        required=False,
        allow_blank=True,
        help_text="Breeding season, e.g. '2025'"
    )


# =============================================================================
# Response Serializers
# =============================================================================

class StatisticsSerializer(serializers.Serializer):
    total_birds = serializers.IntegerField()
    active_birds = serializers.IntegerField()
    total_couples = serializers.IntegerField()
    active_couples = serializers.IntegerField()
    total_nests = serializers.IntegerField()
    active_nests = serializers.IntegerField()
    total_eggs = serializers.IntegerField()
    hatched_eggs = serializers.IntegerField()
    total_aviaries = serializers.IntegerField()


class SpeciesBreakdownSerializer(serializers.Serializer):
    species = serializers.CharField()
    total = serializers.IntegerField()
    active = serializers.IntegerField()
    male = serializers.IntegerField()
    female = serializers.IntegerField()
    unknown = serializers.IntegerField()


class SeasonSummarySerializer(serializers.Serializer):
    season = serializers.CharField()
    couples = serializers.IntegerField()
    active_couples = serializers.IntegerField()
    nests = serializers.IntegerField()
    hatched_eggs = serializers.IntegerField()
    birds_hatched = serializers.IntegerField()
