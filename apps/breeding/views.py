from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.birds.serializers import BirdSerializer, BirdListSerializer
from apps.common.ids import uuid_query_param
from .models import Couple, Nest, Egg
from .serializers import (
    CoupleSerializer,
    NestSerializer,
    EggSerializer,
    HatchInputSerializer,
)
from .services import (
    create_couple,
    update_couple,
    delete_couple,
    get_couples,
    create_nest,
    update_nest,
    delete_nest,
    get_nests,
    get_nests_by_couple,
    create_egg,
    update_egg,
    delete_egg,
    get_eggs,
    get_eggs_by_nest,
    hatch_nest,
    get_offspring,
    CoupleNotFoundError,
    NestNotFoundError,
    EggNotFoundError,
    InvalidBreedingDataError,
    NestNotActiveError,
    InvalidHatchCountError,
)


def _active_param(request):
    value = request.query_params.get('active')
    if value is None:
        return None
    return value.lower() in ('1', 'true', 'yes')


class CoupleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Couple CRUD operations.

    list: Couples of the account (?season=, ?active=)
    create: Pair two birds
    destroy: Remove a couple (its nests are kept)
    """

    serializer_class = CoupleSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Couple.objects.none()
        return get_couples(
            owner=self.request.user,
            season=self.request.query_params.get('season'),
            active=_active_param(self.request),
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            couple = create_couple(owner=request.user, **serializer.validated_data)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CoupleSerializer(couple).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            couple = update_couple(
                owner=request.user,
                couple_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except CoupleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CoupleSerializer(couple).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_couple(owner=request.user, couple_id=kwargs['pk'])
        except CoupleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: NestSerializer(many=True)}, tags=['breeding'])
    @action(detail=True, methods=['get'])
    def nests(self, request, pk=None):
        """Nests of this couple, newest first."""
        couple = self.get_object()
        nests = get_nests_by_couple(owner=request.user, couple_id=couple.id)
        return Response(NestSerializer(nests, many=True).data)

    @extend_schema(responses={200: BirdListSerializer(many=True)}, tags=['breeding'])
    @action(detail=True, methods=['get'])
    def offspring(self, request, pk=None):
        """Birds hatched from this couple's nests."""
        couple = self.get_object()
        birds = get_offspring(owner=request.user, couple_id=couple.id)
        return Response(BirdListSerializer(birds, many=True).data)


class NestViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Nest CRUD operations.

    hatch: Confirm a hatch count; creates the chicks and closes the nest.
    """

    serializer_class = NestSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Nest.objects.none()

        couple_id = uuid_query_param(self.request, 'couple')
        if couple_id:
            return get_nests_by_couple(owner=self.request.user, couple_id=couple_id)
        return get_nests(owner=self.request.user, active=_active_param(self.request))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            nest = create_nest(owner=request.user, **serializer.validated_data)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NestSerializer(nest).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            nest = update_nest(
                owner=request.user,
                nest_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except NestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NestSerializer(nest).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_nest(owner=request.user, nest_id=kwargs['pk'])
        except NestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: EggSerializer(many=True)}, tags=['breeding'])
    @action(detail=True, methods=['get'])
    def eggs(self, request, pk=None):
        """Eggs of this nest, oldest first."""
        nest = self.get_object()
        eggs = get_eggs_by_nest(owner=request.user, nest_id=nest.id)
        return Response(EggSerializer(eggs, many=True).data)

    @extend_schema(
        request=HatchInputSerializer,
        responses={201: BirdSerializer(many=True)},
        tags=['breeding'],
    )
    @action(detail=True, methods=['post'])
    def hatch(self, request, pk=None):
        """
        Mark eggs as hatched.

        POST /api/breeding/nests/{id}/hatch/
        Body: {"hatched_count": 3, "hatch_date": "2025-04-12"}
        """
        serializer = HatchInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            birds = hatch_nest(
                owner=request.user,
                nest_id=pk,
                hatched_count=serializer.validated_data['hatched_count'],
                hatch_date=serializer.validated_data.get('hatch_date') or timezone.localdate(),
            )
        except NestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (NestNotActiveError, InvalidHatchCountError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BirdSerializer(birds, many=True).data, status=status.HTTP_201_CREATED)


class EggViewSet(viewsets.ModelViewSet):
    """ViewSet for Egg CRUD operations. Use ?nest=<id> to list one nest."""

    serializer_class = EggSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Egg.objects.none()

        nest_id = uuid_query_param(self.request, 'nest')
        if nest_id:
            return get_eggs_by_nest(owner=self.request.user, nest_id=nest_id)
        return get_eggs(owner=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            egg = create_egg(owner=request.user, **serializer.validated_data)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(EggSerializer(egg).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            egg = update_egg(
                owner=request.user,
                egg_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except EggNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidBreedingDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(EggSerializer(egg).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_egg(owner=request.user, egg_id=kwargs['pk'])
        except EggNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
