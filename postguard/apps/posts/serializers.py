from rest_framework import serializers

from postguard.apps.authorization.permissions import actor_from_request

from .models import Post


class PostSerializer(serializers.ModelSerializer):
    owner = serializers.PrimaryKeyRelatedField(read_only=True)

    createdAt = serializers.SerializerMethodField(method_name='get_created_at')
    updatedAt = serializers.SerializerMethodField(method_name='get_updated_at')

    # Lets clients hide the entry points for actions the requesting actor
    # cannot perform. The endpoints still enforce every decision themselves.
    permissions = serializers.SerializerMethodField()

    presented_actions = ('view', 'update', 'delete', 'review')

    class Meta:
        model = Post
        fields = (
            'id',
            'title',
            'content',
            'owner',
            'reviewed',
            'createdAt',
            'updatedAt',
            'permissions',
        )
        read_only_fields = ('id', 'reviewed')

    def get_created_at(self, instance):
        return instance.created_at.isoformat()

    def get_updated_at(self, instance):
        return instance.updated_at.isoformat()

    def get_permissions(self, instance):
        gate = self.context.get('gate', None)

        if gate is None:
            return None

        actor = actor_from_request(self.context.get('request', None))
        return gate.abilities(actor, instance, self.presented_actions)
