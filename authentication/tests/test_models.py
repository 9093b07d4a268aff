"""
Tests for the authentication User model and manager.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase

from .factories import UserFactory

User = get_user_model()


class UserManagerTest(TestCase):

    def test_create_user_defaults_username_to_email(self):
        user = User.objects.create_user(email='Mary@Example.com', password='pw-123456!')
        self.assertEqual(user.email, 'Mary@example.com')
        self.assertEqual(user.username, 'Mary@example.com')
        self.assertTrue(user.check_password('pw-123456!'))
        self.assertFalse(user.is_staff)

    def test_create_user_requires_email(self):
        with self.assertRaises(ValueError):
            User.objects.create_user(email='', password='x')

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email='root@example.com', password='pw')
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.is_superuser)


class UserModelTest(TestCase):

    def test_full_name(self):
        user = UserFactory(first_name='Joan', last_name='Arc')
        self.assertEqual(user.full_name, 'Joan Arc')

    def test_full_name_falls_back_to_email(self):
        user = UserFactory(first_name='', last_name='')
        self.assertEqual(user.full_name, user.email)

    def test_str_is_email(self):
        user = UserFactory(email='peter@example.com')
        self.assertEqual(str(user), 'peter@example.com')
