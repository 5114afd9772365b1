import jwt

from datetime import datetime, timedelta, timezone

from django.conf import settings
from django.contrib.auth import authenticate as django_authenticate


class TokenService:
    """
    Issues and reads the JWTs that identify an actor on each request.

    Tokens carry the user's primary key as ``id`` and an ``exp`` claim;
    the lifetime comes from ``POSTGUARD['TOKEN_EXPIRY_DAYS']``.
    """

    ALGORITHM = 'HS256'

    @classmethod
    def expiry_days(cls):
        return settings.POSTGUARD['TOKEN_EXPIRY_DAYS']

    @classmethod
    def generate_token(cls, user):
        expires_at = datetime.now(timezone.utc) + timedelta(
            days=cls.expiry_days()
        )

        payload = {
            'id': user.pk,
            'exp': int(expires_at.timestamp()),
        }

        return jwt.encode(payload, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def decode_token(cls, token):
        """
        Return the token's claims. Expired, tampered or malformed tokens
        raise a subclass of ``jwt.InvalidTokenError``.
        """
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[cls.ALGORITHM])


class AuthenticationService:
    """
    Checks login credentials. Failures raise ``ValueError`` with a message
    fit for the end user; the serializer turns it into a validation error.
    """

    @staticmethod
    def authenticate(email, password):
        if not email:
            raise ValueError('An email address is required to log in.')

        if not password:
            raise ValueError('A password is required to log in.')

        user = django_authenticate(username=email, password=password)

        if user is None:
            raise ValueError(
                'A user with this email and password was not found.'
            )

        return user
