"""
Meal API Tests

Catalog listing, rating and favorites endpoints.
"""
import uuid

import pytest

from meals.models import FavoriteMeal
from meals.services import FavoriteService


@pytest.mark.django_db
class TestMealCatalogAPI:

    def test_list_filters_by_caterer(self, client_for, meal_a1, meal_a2, meal_b1):
        response = client_for('client-1').get('/api/meals/', {'caterer_id': 'caterer-a'})

        assert response.status_code == 200
        assert {item['name'] for item in response.data['results']} == {'Couscous', 'Brik'}

    def test_retrieve_meal(self, client_for, meal_b1):
        response = client_for('client-1').get(f'/api/meals/{meal_b1.id}/')

        assert response.status_code == 200
        assert response.data['caterer_id'] == 'caterer-b'


@pytest.mark.django_db
class TestMealRatingAPI:

    def test_rate_returns_aggregate(self, client_for, meal_a1):
        client_for('client-2').post(f'/api/meals/{meal_a1.id}/rating/', {'rating': 3}, format='json')

        response = client_for('client-1').post(f'/api/meals/{meal_a1.id}/rating/', {'rating': 5}, format='json')

        assert response.status_code == 200
        assert response.data == {'meal_id': str(meal_a1.id), 'average': 4.0, 'count': 2}

    @pytest.mark.parametrize('payload', [{'rating': 0}, {'rating': 6}, {}, {'rating': 4, 'comment': 'nice'}])
    def test_invalid_payload_is_400(self, client_for, meal_a1, payload):
        response = client_for('client-1').post(f'/api/meals/{meal_a1.id}/rating/', payload, format='json')

        assert response.status_code == 400
        meal_a1.refresh_from_db()
        assert meal_a1.rating_count == 0

    def test_unknown_meal_is_404(self, client_for, db):
        response = client_for('client-1').post(f'/api/meals/{uuid.uuid4()}/rating/', {'rating': 4}, format='json')

        assert response.status_code == 404
        assert 'error' in response.data


@pytest.mark.django_db
class TestFavorites:

    def test_toggle_adds_then_removes(self, meal_a1):
        assert FavoriteService.toggle('client-1', meal_a1.id) is True
        assert FavoriteService.toggle('client-1', meal_a1.id) is False
        assert not FavoriteMeal.objects.exists()

    def test_add_and_remove_are_idempotent(self, meal_a1):
        FavoriteService.add('client-1', meal_a1.id)
        FavoriteService.add('client-1', meal_a1.id)
        assert FavoriteMeal.objects.filter(client_id='client-1').count() == 1

        FavoriteService.remove('client-1', meal_a1.id)
        FavoriteService.remove('client-1', meal_a1.id)
        assert not FavoriteMeal.objects.exists()

    def test_favorite_endpoint_and_listing(self, client_for, meal_a1, meal_b1):
        client = client_for('client-1')

        response = client.post(f'/api/meals/{meal_b1.id}/favorite/')
        assert response.status_code == 200
        assert response.data['is_favorite'] is True

        response = client.get('/api/meals/favorites/')
        assert [item['name'] for item in response.data] == ['Lablabi']

        assert client_for('client-2').get('/api/meals/favorites/').data == []
