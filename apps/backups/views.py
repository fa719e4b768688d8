import logging
from django.http import HttpResponse
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import ImportSerializer, CollectionCountsSerializer
from .services import (
    export_account_data,
    import_account_data,
    snapshot_account,
    restore_account,
    EXPORT_FORMATS,
    BackupStoreError,
    InvalidBackupError,
    UnsupportedFormatError,
    NoBackupFoundError,
)

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    'text': 'text/plain; charset=utf-8',
    'json': 'application/json',
}
EXTENSIONS = {
    'text': 'txt',
    'json': 'json',
}


@extend_schema(
    parameters=[
        OpenApiParameter('format', OpenApiTypes.STR, enum=list(EXPORT_FORMATS), description='text (default) or json'),
    ],
    responses={(200, 'text/plain'): OpenApiTypes.STR, (200, 'application/json'): OpenApiTypes.OBJECT},
    description="Download all of the current account's data.",
    tags=['backups'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def export_data(request):
    """Export the account as a text report or JSON document."""
    fmt = request.query_params.get('format', 'text')

    try:
        content = export_account_data(user=request.user, fmt=fmt)
    except UnsupportedFormatError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    filename = f"aviary-keeper-{timezone.localdate():%Y%m%d}.{EXTENSIONS[fmt]}"
    response = HttpResponse(content, content_type=CONTENT_TYPES[fmt])
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@extend_schema(
    request=ImportSerializer,
    responses={200: CollectionCountsSerializer},
    description="Replace all of the current account's data with an export.",
    tags=['backups'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def import_data(request):
    serializer = ImportSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    payload = serializer.validated_data.get('data', serializer.validated_data.get('text'))

    try:
        counts = import_account_data(user=request.user, payload=payload)
    except InvalidBackupError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(counts)


@extend_schema(
    request=None,
    responses={200: CollectionCountsSerializer},
    description="Copy the current account's data to the backup store.",
    tags=['backups'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def snapshot(request):
    try:
        counts = snapshot_account(user=request.user)
    except BackupStoreError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(counts)


@extend_schema(
    request=None,
    responses={200: CollectionCountsSerializer},
    description="Replace the current account's data with the backup store's copy.",
    tags=['backups'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def restore(request):
    try:
        counts = restore_account(user=request.user)
    except NoBackupFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidBackupError as e:
        logger.warning("Restore of %s rejected: %s", request.user.email, e)
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except BackupStoreError as e:
        return Response({'error': str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return Response(counts)
