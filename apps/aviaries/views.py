from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.birds.serializers import BirdListSerializer
from apps.birds.services import get_birds_by_aviary
from .models import Aviary
from .serializers import AviarySerializer, AviaryOccupancySerializer
from .services import (
    create_aviary,
    update_aviary,
    delete_aviary,
    get_aviaries,
    get_aviary_occupancy,
    AviaryNotFoundError,
    InvalidAviaryError,
)


class AviaryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Aviary CRUD operations.

    All business logic is handled by services.

    list: Get all aviaries of the current account
    create: Create a new aviary
    retrieve: Get a specific aviary
    update / partial_update: Edit an aviary
    destroy: Delete an aviary (birds keep a dangling aviary_id)
    """

    serializer_class = AviarySerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Return only the current account's aviaries."""
        if getattr(self, 'swagger_fake_view', False):
            return Aviary.objects.none()
        return get_aviaries(owner=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            aviary = create_aviary(owner=request.user, **serializer.validated_data)
        except InvalidAviaryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AviarySerializer(aviary).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            aviary = update_aviary(
                owner=request.user,
                aviary_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except AviaryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidAviaryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AviarySerializer(aviary).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_aviary(owner=request.user, aviary_id=kwargs['pk'])
        except AviaryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: BirdListSerializer(many=True)}, tags=['aviaries'])
    @action(detail=True, methods=['get'])
    def birds(self, request, pk=None):
        """
        Birds housed in this aviary.

        GET /api/aviaries/{id}/birds/
        """
        aviary = self.get_object()
        birds = get_birds_by_aviary(owner=request.user, aviary_id=aviary.id)
        return Response(BirdListSerializer(birds, many=True).data)

    @extend_schema(responses={200: AviaryOccupancySerializer}, tags=['aviaries'])
    @action(detail=True, methods=['get'])
    def occupancy(self, request, pk=None):
        """
        Birds assigned vs. capacity.

        GET /api/aviaries/{id}/occupancy/
        """
        aviary = self.get_object()
        data = get_aviary_occupancy(owner=request.user, aviary_id=aviary.id)
        return Response(AviaryOccupancySerializer(data).data)
