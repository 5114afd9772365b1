import jwt

from datetime import datetime, timedelta, timezone

from django.conf import settings
from django.test import TestCase, override_settings

from postguard.apps.authentication.models import User
from postguard.apps.authentication.services import (
    AuthenticationService, TokenService
)


class TokenServiceTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='tokenuser', email='tokenuser@test.com', password='testpass123'
        )

    def test_generate_token_returns_string(self):
        self.assertIsInstance(TokenService.generate_token(self.user), str)

    def test_token_contains_user_id(self):
        token = TokenService.generate_token(self.user)
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=['HS256'])
        self.assertEqual(payload['id'], self.user.pk)

    def test_token_uses_hs256_algorithm(self):
        header = jwt.get_unverified_header(TokenService.generate_token(self.user))
        self.assertEqual(header['alg'], 'HS256')

    @override_settings(POSTGUARD={'SUPERUSER_BYPASS': False, 'TOKEN_EXPIRY_DAYS': 1})
    def test_expiry_comes_from_settings(self):
        token = TokenService.generate_token(self.user)
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=['HS256'])

        expected = datetime.now(timezone.utc) + timedelta(days=1)
        self.assertAlmostEqual(payload['exp'], expected.timestamp(), delta=60)

    def test_decode_token_round_trips_the_id(self):
        token = TokenService.generate_token(self.user)
        self.assertEqual(TokenService.decode_token(token)['id'], self.user.pk)

    def test_decode_token_rejects_a_foreign_signature(self):
        token = jwt.encode({'id': self.user.pk}, 'not-the-secret', algorithm='HS256')
        with self.assertRaises(jwt.InvalidSignatureError):
            TokenService.decode_token(token)

    def test_decode_token_rejects_an_expired_token(self):
        expired = datetime.now(timezone.utc) - timedelta(days=1)
        token = jwt.encode(
            {'id': self.user.pk, 'exp': int(expired.timestamp())},
            settings.SECRET_KEY,
            algorithm='HS256'
        )
        with self.assertRaises(jwt.ExpiredSignatureError):
            TokenService.decode_token(token)


class AuthenticationServiceTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='authuser', email='authuser@test.com', password='testpass123'
        )

    def test_authenticate_returns_user_with_valid_credentials(self):
        result = AuthenticationService.authenticate('authuser@test.com', 'testpass123')
        self.assertEqual(result, self.user)

    def test_authenticate_raises_on_missing_email(self):
        with self.assertRaises(ValueError) as ctx:
            AuthenticationService.authenticate(None, 'testpass123')
        self.assertIn('email', str(ctx.exception).lower())

    def test_authenticate_raises_on_missing_password(self):
        with self.assertRaises(ValueError) as ctx:
            AuthenticationService.authenticate('authuser@test.com', '')
        self.assertIn('password', str(ctx.exception).lower())

    def test_authenticate_raises_on_wrong_password(self):
        with self.assertRaises(ValueError) as ctx:
            AuthenticationService.authenticate('authuser@test.com', 'wrongpassword')
        self.assertIn('not found', str(ctx.exception).lower())

    def test_inactive_user_is_rejected_by_the_auth_backend(self):
        self.user.is_active = False
        self.user.save()

        with self.assertRaises(ValueError) as ctx:
            AuthenticationService.authenticate('authuser@test.com', 'testpass123')
        self.assertIn('not found', str(ctx.exception).lower())
