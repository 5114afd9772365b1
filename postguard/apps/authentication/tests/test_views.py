from django.test import TestCase

from rest_framework.test import APIClient

from postguard.apps.authentication.models import User


class RegistrationAPIViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_registration_creates_user_and_returns_token(self):
        response = self.client.post('/api/users', {
            'user': {
                'username': 'newuser',
                'email': 'newuser@test.com',
                'password': 'strongpass123',
            }
        }, format='json')

        self.assertEqual(response.status_code, 201)
        self.assertIn('token', response.data['user'])
        self.assertTrue(User.objects.filter(email='newuser@test.com').exists())

    def test_short_password_is_rejected(self):
        response = self.client.post('/api/users', {
            'user': {
                'username': 'newuser',
                'email': 'newuser@test.com',
                'password': '123',
            }
        }, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('password', response.data['errors'])


class LoginAPIViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        User.objects.create_user(
            username='loginuser', email='loginuser@test.com', password='testpass123'
        )

    def test_login_returns_token(self):
        response = self.client.post('/api/users/login', {
            'user': {'email': 'loginuser@test.com', 'password': 'testpass123'}
        }, format='json')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['user']['username'], 'loginuser')
        self.assertTrue(response.data['user']['token'])

    def test_wrong_password_is_rejected(self):
        response = self.client.post('/api/users/login', {
            'user': {'email': 'loginuser@test.com', 'password': 'wrongpass'}
        }, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertIn('error', response.data['errors'])
