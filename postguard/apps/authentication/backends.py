import logging

import jwt

from rest_framework import authentication, exceptions

from .models import User
from .services import TokenService

logger = logging.getLogger(__name__)


class JWTAuthentication(authentication.BaseAuthentication):
    """
    Resolves the actor for a request from an ``Authorization: Token <jwt>``
    header. Requests without the header stay anonymous; a header that is
    present but invalid fails authentication outright.
    """

    authentication_header_prefix = 'Token'

    def authenticate(self, request):
        auth_header = authentication.get_authorization_header(request).split()

        if not auth_header:
            return None

        if len(auth_header) != 2:
            # Either no credentials or credentials containing spaces.
            return None

        prefix = auth_header[0].decode('utf-8')
        token = auth_header[1].decode('utf-8')

        if prefix.lower() != self.authentication_header_prefix.lower():
            return None

        return self._authenticate_credentials(token)

    def _authenticate_credentials(self, token):
        try:
            payload = TokenService.decode_token(token)
        except jwt.InvalidTokenError as exc:
            logger.info('Rejected token: %s', exc)
            raise exceptions.AuthenticationFailed(
                'Invalid authentication. Could not decode token.'
            )

        try:
            user = User.objects.get(pk=payload['id'])
        except (KeyError, User.DoesNotExist):
            raise exceptions.AuthenticationFailed(
                'No user matching this token was found.'
            )

        if not user.is_active:
            raise exceptions.AuthenticationFailed(
                'This user has been deactivated.'
            )

        return (user, token)
