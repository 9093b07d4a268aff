"""
Tests for Problem+JSON error responses.
"""

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory
from core.exceptions import AlreadyMemberError, format_validation_errors, get_error_detail


class ProblemDetailHelpersTest(TestCase):

    def test_detail_prefers_detail_key(self):
        self.assertEqual(get_error_detail({'detail': 'Nope'}), 'Nope')

    def test_detail_from_field_errors(self):
        self.assertEqual(get_error_detail({'name': ['Required.']}), 'name: Required.')

    def test_invalid_params(self):
        params = format_validation_errors({'name': ['Required.', 'Too short.'], 'detail': 'x'})
        self.assertEqual(params, [
            {'name': 'name', 'reason': 'Required.'},
            {'name': 'name', 'reason': 'Too short.'},
        ])

    def test_domain_exception_defaults(self):
        exc = AlreadyMemberError()
        self.assertEqual(exc.status_code, 409)
        self.assertEqual(exc.title, 'Already a Member')


class ProblemResponseTest(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_unauthenticated_is_problem_json(self):
        response = self.client.get(reverse('churches:church-list'))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response['Content-Type'], 'application/problem+json')
        self.assertEqual(response.data['title'], 'Unauthorized')
        self.assertEqual(response.data['status'], 401)

    def test_validation_error_lists_invalid_params(self):
        self.client.force_authenticate(user=UserFactory())

        response = self.client.post(reverse('churches:church-list'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', [p['name'] for p in response.data['invalid_params']])
