from rest_framework import serializers

from .models import User
from .services import AuthenticationService, TokenService


class RegistrationSerializer(serializers.ModelSerializer):
    """Validates a sign-up request and creates the user."""

    password = serializers.CharField(
        max_length=128,
        min_length=8,
        write_only=True
    )

    token = serializers.CharField(max_length=255, read_only=True)

    class Meta:
        model = User
        fields = ['email', 'username', 'password', 'token']

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(max_length=255)
    username = serializers.CharField(max_length=255, read_only=True)
    password = serializers.CharField(max_length=128, write_only=True)
    token = serializers.CharField(max_length=255, read_only=True)

    def validate(self, data):
        try:
            user = AuthenticationService.authenticate(
                data.get('email', None), data.get('password', None)
            )
        except ValueError as e:
            raise serializers.ValidationError(str(e))

        return {
            'email': user.email,
            'username': user.username,
            'token': TokenService.generate_token(user),
        }
