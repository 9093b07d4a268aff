"""
Tests for request correlation ids and the health check.
"""

from django.test import TestCase
from django.urls import reverse


class RequestContextMiddlewareTest(TestCase):

    def test_generates_request_id(self):
        response = self.client.get(reverse('health:check'))

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response['X-Request-ID'])

    def test_echoes_inbound_request_id(self):
        response = self.client.get(reverse('health:check'), HTTP_X_REQUEST_ID='abc-123')

        self.assertEqual(response['X-Request-ID'], 'abc-123')


class HealthCheckTest(TestCase):

    def test_healthy(self):
        response = self.client.get(reverse('health:check'))

        self.assertEqual(response.json(), {'status': 'healthy', 'service': 'Saint Central API'})
