"""
Tests for authentication endpoints: register, token pair, me.
"""

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from .factories import UserFactory

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.mark.django_db
class TestRegistrationView:

    def test_successful_registration_returns_tokens(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'NewUser@Example.com',
            'password': 'SecurePassword123!',
            'password_confirm': 'SecurePassword123!',
            'first_name': 'New',
            'last_name': 'User',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['access']
        assert response.data['refresh']
        assert response.data['user']['email'] == 'newuser@example.com'
        assert response.data['user']['full_name'] == 'New User'
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_accepts_confirm_password_alias(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'alias@example.com',
            'password': 'SecurePassword123!',
            'confirmPassword': 'SecurePassword123!',
        }, format='json')
        assert response.status_code == status.HTTP_201_CREATED

    def test_password_mismatch(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'mismatch@example.com',
            'password': 'SecurePassword123!',
            'password_confirm': 'Different123!',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response['Content-Type'] == 'application/problem+json'
        names = [p['name'] for p in response.data['invalid_params']]
        assert 'password_confirm' in names

    def test_duplicate_email_rejected(self, api_client):
        UserFactory(email='taken@example.com')
        response = api_client.post(reverse('authentication:register'), {
            'email': 'TAKEN@example.com',
            'password': 'SecurePassword123!',
        }, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_weak_password_rejected(self, api_client):
        response = api_client.post(reverse('authentication:register'), {
            'email': 'weak@example.com',
            'password': '12345678',
        }, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestTokenObtain:

    def test_obtain_pair_with_email(self, api_client):
        UserFactory(email='login@example.com', password='TestPassword123!')
        response = api_client.post(reverse('authentication:token-obtain'), {
            'email': 'login@example.com',
            'password': 'TestPassword123!',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data

    def test_wrong_password(self, api_client):
        UserFactory(email='login2@example.com')
        response = api_client.post(reverse('authentication:token-obtain'), {
            'email': 'login2@example.com',
            'password': 'nope',
        }, format='json')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestMeView:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('authentication:me'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_get_me(self, api_client):
        user = UserFactory(first_name='Clare', last_name='Assisi')
        api_client.force_authenticate(user=user)

        response = api_client.get(reverse('authentication:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(user.id)
        assert response.data['full_name'] == 'Clare Assisi'

    def test_patch_me_ignores_email(self, api_client):
        user = UserFactory(email='me@example.com')
        api_client.force_authenticate(user=user)

        response = api_client.patch(reverse('authentication:me'), {
            'denomination': 'Orthodox',
            'email': 'hijack@example.com',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.denomination == 'Orthodox'
        assert user.email == 'me@example.com'
