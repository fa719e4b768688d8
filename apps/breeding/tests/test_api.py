import uuid
import pytest
from django.urls import reverse
from rest_framework import status
from apps.birds.models import Bird
from apps.breeding.models import Couple, Nest, Egg


@pytest.mark.django_db
class TestCoupleEndpoints:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('breeding:couple-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create(self, authenticated_client, user, male, female):
        response = authenticated_client.post(
            reverse('breeding:couple-list'),
            {'male_id': str(male.id), 'female_id': str(female.id), 'season': '2025'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Couple.objects.get(id=response.data['id']).owner == user

    def test_create_same_bird_twice(self, authenticated_client, male):
        response = authenticated_client.post(
            reverse('breeding:couple-list'),
            {'male_id': str(male.id), 'female_id': str(male.id), 'season': '2025'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_list_filtered_by_season(self, authenticated_client, user, couple, male, female):
        Couple.objects.create(owner=user, male_id=male.id, female_id=female.id, season='2024')

        response = authenticated_client.get(reverse('breeding:couple-list'), {'season': '2025'})

        assert [item['id'] for item in response.data] == [str(couple.id)]

    def test_nests_of_couple(self, authenticated_client, couple, nest):
        response = authenticated_client.get(reverse('breeding:couple-nests', args=[couple.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(nest.id)]

    def test_offspring(self, authenticated_client, couple, nest):
        authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 2, 'hatch_date': '2025-03-20'},
            format='json'
        )

        response = authenticated_client.get(reverse('breeding:couple-offspring', args=[couple.id]))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

    def test_delete(self, authenticated_client, couple):
        response = authenticated_client.delete(reverse('breeding:couple-detail', args=[couple.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Couple.objects.filter(id=couple.id).exists()

    def test_other_account_cannot_see_couple(self, api_client, other_user, couple):
        api_client.force_authenticate(user=other_user)

        response = api_client.get(reverse('breeding:couple-detail', args=[couple.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestNestEndpoints:

    def test_create(self, authenticated_client, couple):
        response = authenticated_client.post(
            reverse('breeding:nest-list'),
            {'couple_id': str(couple.id), 'start_date': '2025-03-01', 'egg_count': 5},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['active'] is True

    def test_filter_by_couple(self, authenticated_client, nest, make_nest):
        make_nest(couple_id=uuid.uuid4())

        response = authenticated_client.get(
            reverse('breeding:nest-list'), {'couple': str(nest.couple_id)}
        )

        assert [item['id'] for item in response.data] == [str(nest.id)]

    def test_eggs_of_nest(self, authenticated_client, nest):
        response = authenticated_client.get(reverse('breeding:nest-eggs', args=[nest.id]))

        assert response.status_code == status.HTTP_200_OK
        lay_dates = [item['lay_date'] for item in response.data]
        assert lay_dates == ['2025-03-02', '2025-03-03', '2025-03-04', '2025-03-05']


@pytest.mark.django_db
class TestHatchEndpoint:

    def test_hatch(self, authenticated_client, nest, male, female):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 3, 'hatch_date': '2025-03-20'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data) == 3
        assert {item['father_id'] for item in response.data} == {str(male.id)}
        assert {item['mother_id'] for item in response.data} == {str(female.id)}
        nest.refresh_from_db()
        assert nest.active is False
        assert Egg.objects.filter(nest_id=nest.id, status='hatched').count() == 3

    def test_hatch_date_defaults_to_today(self, authenticated_client, nest):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 1},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        nest.refresh_from_db()
        assert nest.actual_hatch_date is not None

    def test_too_many(self, authenticated_client, nest):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 5},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Enter a valid number between 1 and 4'
        assert Bird.objects.count() == 2

    def test_zero(self, authenticated_client, nest):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 0},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        nest.refresh_from_db()
        assert nest.active is True

    def test_not_a_number(self, authenticated_client, nest):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 'three'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_already_hatched(self, authenticated_client, nest):
        Nest.objects.filter(id=nest.id).update(active=False)

        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[nest.id]),
            {'hatched_count': 1},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_nest(self, authenticated_client):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=[uuid.uuid4()]),
            {'hatched_count': 1},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestEggEndpoints:

    def test_create(self, authenticated_client, nest):
        response = authenticated_client.post(
            reverse('breeding:egg-list'),
            {'nest_id': str(nest.id), 'lay_date': '2025-03-06'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'laid'

    def test_filter_by_nest(self, authenticated_client, user, nest, make_nest):
        other = make_nest()
        Egg.objects.create(owner=user, nest_id=other.id, lay_date=nest.start_date)

        response = authenticated_client.get(reverse('breeding:egg-list'), {'nest': str(nest.id)})

        assert len(response.data) == 4

    def test_mark_infertile(self, authenticated_client, user, nest):
        egg = Egg.objects.filter(nest_id=nest.id).first()

        response = authenticated_client.patch(
            reverse('breeding:egg-detail', args=[egg.id]),
            {'status': 'infertile'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        egg.refresh_from_db()
        assert egg.status == 'infertile'


@pytest.mark.django_db
class TestMalformedIds:

    @pytest.mark.parametrize('url_name, param', [
        ('breeding:nest-list', 'couple'),
        ('breeding:egg-list', 'nest'),
    ])
    def test_malformed_filter_is_rejected(self, authenticated_client, url_name, param):
        response = authenticated_client.get(reverse(url_name), {param: 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert param in response.data

    def test_hatch_malformed_nest(self, authenticated_client):
        response = authenticated_client.post(
            reverse('breeding:nest-hatch', args=['abc']),
            {'hatched_count': 1},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('url_name', [
        'breeding:couple-detail',
        'breeding:nest-detail',
        'breeding:egg-detail',
    ])
    def test_malformed_pk_is_not_found(self, authenticated_client, url_name):
        url = reverse(url_name, args=['abc'])

        assert authenticated_client.patch(url, {'notes': 'x'}, format='json').status_code == \
            status.HTTP_404_NOT_FOUND
        assert authenticated_client.delete(url).status_code == status.HTTP_404_NOT_FOUND
