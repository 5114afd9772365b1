import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from postguard.apps.authorization.permissions import (
    GatePermission, actor_from_request
)

from .models import Post
from .pagination import PostPagination
from .policies import build_post_gate
from .serializers import PostSerializer

logger = logging.getLogger(__name__)


def get_post(pk):
    """
    Shared post lookup. A missing post is reported as not found before any
    authorization happens: with no post there is no owner to check.
    """
    try:
        return Post.objects.select_related('owner').get(pk=pk)
    except Post.DoesNotExist:
        raise NotFound('A post with this ID does not exist.')


def post_payload(request):
    """
    The ``post`` object of a request body. A body that is not a JSON
    object is handed to the serializer as is, which rejects it.
    """
    if isinstance(request.data, dict):
        return request.data.get('post', {})

    return request.data


class PostViewSet(viewsets.GenericViewSet):
    """
    Post endpoints guarded by ``PostPolicy``.

    Every handler maps to a policy action through ``policy_actions`` and
    ``GatePermission`` asks the gate. Handlers contain no authorization
    logic of their own. Pass ``gate=`` to ``as_view`` to supply a
    differently configured gate; otherwise one is built from settings.
    """

    queryset = Post.objects.select_related('owner')
    permission_classes = (GatePermission,)
    serializer_class = PostSerializer
    pagination_class = PostPagination
    lookup_value_regex = r'\d+'

    resource_type = Post
    gate = None

    policy_actions = {
        'list': 'view_any',
        'create': 'create',
        'retrieve': 'view',
        'update': 'update',
        'partial_update': 'update',
        'destroy': 'delete',
        'review': 'review',
    }

    # DRF describes the POST and PUT forms in an OPTIONS response by
    # re-checking permissions with a cloned request.
    metadata_actions = {
        'POST': 'create',
        'PUT': 'update',
    }

    def get_gate(self):
        if self.gate is None:
            self.gate = build_post_gate()

        return self.gate

    def get_policy_action(self):
        if self.action == 'metadata':
            return self.metadata_actions.get(self.request.method, None)

        return self.policy_actions.get(self.action, None)

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['gate'] = self.get_gate()
        return context

    def get_queryset(self):
        # The policy lets anyone ask for the list; the list itself only
        # holds the caller's own posts.
        return self.queryset.owned_by(actor_from_request(self.request))

    def get_object(self):
        post = get_post(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, post)
        return post

    def list(self, request):
        page = self.paginate_queryset(self.get_queryset())
        serializer = self.get_serializer(page, many=True)

        return self.get_paginated_response(serializer.data)

    def create(self, request):
        serializer = self.get_serializer(data=post_payload(request))
        serializer.is_valid(raise_exception=True)
        post = serializer.save(owner=request.user)

        logger.info('Post %s created by user %s.', post.pk, request.user.pk)

        return Response({
            'post': serializer.data,
            'message': 'Post created successfully.',
        }, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        serializer = self.get_serializer(self.get_object())

        return Response({'post': serializer.data}, status=status.HTTP_200_OK)

    def update(self, request, pk=None, partial=False):
        post = self.get_object()

        serializer = self.get_serializer(
            post, data=post_payload(request), partial=partial
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response({
            'post': serializer.data,
            'message': 'Post updated successfully.',
        }, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        post = self.get_object()
        post.delete()

        logger.info('Post %s deleted by user %s.', pk, request.user.pk)

        return Response({
            'message': 'Post deleted successfully.',
        }, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'])
    def review(self, request, pk=None):
        post = self.get_object()
        post.reviewed = True
        post.save(update_fields=['reviewed', 'updated_at'])

        serializer = self.get_serializer(post)

        return Response({
            'post': serializer.data,
            'message': 'Post reviewed successfully.',
        }, status=status.HTTP_200_OK)


class InlinePostViewSet(viewsets.ViewSet):
    """
    The same post endpoints with the authentication and ownership checks
    written out in each handler instead of delegated to a policy.

    Anonymous callers listing posts see every post here, while
    ``PostViewSet`` shows them an empty list.
    """

    permission_classes = (AllowAny,)
    lookup_value_regex = r'\d+'

    def list(self, request):
        if request.user.is_authenticated:
            posts = Post.objects.filter(owner_id=request.user.id)
        else:
            posts = Post.objects.all()

        serializer = PostSerializer(posts, many=True, context={'request': request})

        return Response({
            'posts': serializer.data,
            'postsCount': len(serializer.data),
        }, status=status.HTTP_200_OK)

    def create(self, request):
        if not request.user.is_authenticated:
            raise PermissionDenied()

        serializer = PostSerializer(
            data=post_payload(request), context={'request': request}
        )
        serializer.is_valid(raise_exception=True)
        serializer.save(owner=request.user)

        return Response({
            'post': serializer.data,
            'message': 'Post created successfully.',
        }, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        post = get_post(pk)

        if not request.user.is_authenticated:
            raise PermissionDenied()

        # check if the post is owned by the user
        if post.owner_id != request.user.id:
            raise PermissionDenied()

        serializer = PostSerializer(post, context={'request': request})

        return Response({'post': serializer.data}, status=status.HTTP_200_OK)

    def update(self, request, pk=None, partial=False):
        post = get_post(pk)

        if not request.user.is_authenticated:
            raise PermissionDenied()

        # check if the post is owned by the user
        if post.owner_id != request.user.id:
            raise PermissionDenied('You are not allowed to edit this post.')

        serializer = PostSerializer(
            post,
            data=post_payload(request),
            partial=partial,
            context={'request': request}
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response({
            'post': serializer.data,
            'message': 'Post updated successfully.',
        }, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        post = get_post(pk)

        if not request.user.is_authenticated:
            raise PermissionDenied()

        # check if the post is owned by the user
        if post.owner_id != request.user.id:
            raise PermissionDenied('You are not allowed to delete this post.')

        post.delete()

        return Response({
            'message': 'Post deleted successfully.',
        }, status=status.HTTP_200_OK)
