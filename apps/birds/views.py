from django.conf import settings
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.ids import uuid_query_param
from apps.breeding.services import get_parents, get_children, get_pedigree
from .models import Bird, HealthRecord, Gender
from .serializers import (
    BirdSerializer,
    BirdListSerializer,
    ParentsSerializer,
    RingNumberConflictSerializer,
    HealthRecordSerializer,
    pedigree_data,
)
from .services import (
    create_bird,
    update_bird,
    delete_bird,
    search_birds,
    get_breeding_candidates,
    find_ring_number_conflicts,
    create_health_record,
    update_health_record,
    delete_health_record,
    get_health_records,
    get_health_records_by_bird,
    BirdNotFoundError,
    InvalidBirdError,
    HealthRecordNotFoundError,
)


DEFAULT_PEDIGREE_DEPTH = 3


class BirdViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Bird CRUD operations.

    list: Get the account's birds (with filters)
    create: Add a bird
    retrieve: Get a specific bird
    update / partial_update: Edit a bird or move it to another aviary
    destroy: Remove a bird (no cascade)
    """

    serializer_class = BirdSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """
        Filter birds based on query parameters.

        Filters:
        - search: Ring number, name, species or subspecies
        - status: Bird status
        - gender: Bird gender
        - aviary: Aviary id
        """
        if getattr(self, 'swagger_fake_view', False):
            return Bird.objects.none()
        return search_birds(
            owner=self.request.user,
            search=self.request.query_params.get('search'),
            status=self.request.query_params.get('status'),
            gender=self.request.query_params.get('gender'),
            aviary_id=uuid_query_param(self.request, 'aviary'),
        )

    def get_serializer_class(self):
        if self.action == 'list':
            return BirdListSerializer
        return BirdSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            bird = create_bird(owner=request.user, **serializer.validated_data)
        except InvalidBirdError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BirdSerializer(bird).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = BirdSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            bird = update_bird(
                owner=request.user,
                bird_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except BirdNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidBirdError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BirdSerializer(bird).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_bird(owner=request.user, bird_id=kwargs['pk'])
        except BirdNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: ParentsSerializer}, tags=['birds'])
    @action(detail=True, methods=['get'])
    def parents(self, request, pk=None):
        """Father and mother; unknown or removed parents are null."""
        bird = self.get_object()
        return Response(ParentsSerializer(get_parents(owner=request.user, bird_id=bird.id)).data)

    @extend_schema(responses={200: BirdListSerializer(many=True)}, tags=['birds'])
    @action(detail=True, methods=['get'])
    def children(self, request, pk=None):
        """Birds that have this bird as father or mother."""
        bird = self.get_object()
        children = get_children(owner=request.user, bird_id=bird.id)
        return Response(BirdListSerializer(children, many=True).data)

    @extend_schema(
        parameters=[OpenApiParameter('depth', int, description='Ancestor generations')],
        tags=['birds'],
    )
    @action(detail=True, methods=['get'])
    def pedigree(self, request, pk=None):
        """
        Ancestor tree.

        GET /api/birds/{id}/pedigree/?depth=3
        """
        bird = self.get_object()
        max_depth = settings.BIRD_PEDIGREE_MAX_DEPTH

        try:
            depth = int(request.query_params.get('depth', DEFAULT_PEDIGREE_DEPTH))
        except ValueError:
            return Response(
                {'error': 'depth must be a whole number'},
                status=status.HTTP_400_BAD_REQUEST
            )
        if depth < 0 or depth > max_depth:
            return Response(
                {'error': f'depth must be between 0 and {max_depth}'},
                status=status.HTTP_400_BAD_REQUEST
            )

        tree = get_pedigree(owner=request.user, bird_id=bird.id, depth=depth)
        return Response(pedigree_data(tree))

    @extend_schema(responses={200: HealthRecordSerializer(many=True)}, tags=['birds'])
    @action(detail=True, methods=['get'], url_path='health-records')
    def health_records(self, request, pk=None):
        """Health records of this bird, most recent first."""
        bird = self.get_object()
        records = get_health_records_by_bird(owner=request.user, bird_id=bird.id)
        return Response(HealthRecordSerializer(records, many=True).data)

    @extend_schema(
        parameters=[OpenApiParameter('ring_number', str, required=True)],
        responses={200: RingNumberConflictSerializer(many=True)},
        tags=['birds'],
    )
    @action(detail=False, methods=['get'], url_path='ring-check')
    def ring_check(self, request):
        """
        Birds whose ring number matches or nearly matches.

        GET /api/birds/ring-check/?ring_number=NL-2024-017
        """
        ring_number = request.query_params.get('ring_number', '').strip()
        if not ring_number:
            return Response(
                {'error': 'ring_number is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        conflicts = find_ring_number_conflicts(
            owner=request.user,
            ring_number=ring_number,
            exclude_bird_id=uuid_query_param(request, 'exclude'),
        )
        data = [
            {'bird': bird, 'score': score, 'match_type': match_type}
            for bird, score, match_type in conflicts
        ]
        return Response(RingNumberConflictSerializer(data, many=True).data)

    @extend_schema(
        parameters=[OpenApiParameter('gender', str, required=True, enum=['male', 'female'])],
        responses={200: BirdListSerializer(many=True)},
        tags=['birds'],
    )
    @action(detail=False, methods=['get'])
    def candidates(self, request):
        """Active birds of one gender, for pairing a couple."""
        gender = request.query_params.get('gender')
        if gender not in (Gender.MALE, Gender.FEMALE):
            return Response(
                {'error': 'gender must be male or female'},
                status=status.HTTP_400_BAD_REQUEST
            )

        birds = get_breeding_candidates(owner=request.user, gender=gender)
        return Response(BirdListSerializer(birds, many=True).data)


class HealthRecordViewSet(viewsets.ModelViewSet):
    """
    ViewSet for HealthRecord CRUD operations.

    Use ?bird=<id> to list the records of one bird.
    """

    serializer_class = HealthRecordSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return HealthRecord.objects.none()

        bird_id = uuid_query_param(self.request, 'bird')
        if bird_id:
            return get_health_records_by_bird(owner=self.request.user, bird_id=bird_id)
        return get_health_records(owner=self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record = create_health_record(owner=request.user, **serializer.validated_data)
        except InvalidBirdError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(HealthRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            record = update_health_record(
                owner=request.user,
                record_id=kwargs['pk'],
                data=serializer.validated_data
            )
        except HealthRecordNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidBirdError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(HealthRecordSerializer(record).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_health_record(owner=request.user, record_id=kwargs['pk'])
        except HealthRecordNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
