from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .analytics import AnalyticsQueries
from .serializers import (
    SeasonQuerySerializer,
    StatisticsSerializer,
    SpeciesBreakdownSerializer,
    SeasonSummarySerializer,
)


@extend_schema(
    responses={200: StatisticsSerializer},
    description="Counters for the current account's birds, couples, nests, eggs and aviaries.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def statistics(request):
    """Dashboard counters - thin HTTP handler."""
    data = AnalyticsQueries.statistics(owner_id=request.user.id)
    return Response(StatisticsSerializer(data).data)


@extend_schema(
    responses={200: SpeciesBreakdownSerializer(many=True)},
    description="Number of birds per species, largest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def species_breakdown(request):
    data = AnalyticsQueries.species_breakdown(owner_id=request.user.id)
    return Response(SpeciesBreakdownSerializer(data, many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter('season', OpenApiTypes.STR, description="Breeding season, e.g. '2025'"),
    ],
    responses={200: SeasonSummarySerializer(many=True)},
    description="Couples, nests and hatched eggs per breeding season, newest first.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def season_summary(request):
    """Per-season breeding results - thin HTTP handler."""
    query_serializer = SeasonQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = AnalyticsQueries.season_summary(
        owner_id=request.user.id,
        season=query_serializer.validated_data.get('season') or None,
    )
    return Response(SeasonSummarySerializer(data, many=True).data)
