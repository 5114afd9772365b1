from django.test import TestCase

from rest_framework.test import APIRequestFactory

from postguard.apps.posts.policies import build_post_gate
from postguard.apps.posts.serializers import PostSerializer

from .helpers import make_post, make_user


class PostSerializerTest(TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = make_user('owner')
        self.other_user = make_user('other')
        self.post = make_post(self.user)

    def _context(self, user):
        request = self.factory.get('/')
        request.user = user
        return {'request': request, 'gate': build_post_gate()}

    def test_serializes_camel_case_timestamps(self):
        data = PostSerializer(self.post).data
        self.assertIn('createdAt', data)
        self.assertIn('updatedAt', data)

    def test_owner_is_the_owner_id(self):
        self.assertEqual(PostSerializer(self.post).data['owner'], self.user.pk)

    def test_permissions_reflect_the_owner(self):
        data = PostSerializer(self.post, context=self._context(self.user)).data
        self.assertTrue(all(data['permissions'].values()))

    def test_permissions_hide_actions_from_other_users(self):
        data = PostSerializer(self.post, context=self._context(self.other_user)).data
        self.assertFalse(any(data['permissions'].values()))

    def test_permissions_are_null_without_a_gate(self):
        self.assertIsNone(PostSerializer(self.post).data['permissions'])

    def test_owner_and_reviewed_are_read_only(self):
        serializer = PostSerializer(
            self.post,
            data={'owner': self.other_user.pk, 'reviewed': True},
            partial=True
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        serializer.save()

        self.post.refresh_from_db()
        self.assertEqual(self.post.owner_id, self.user.pk)
        self.assertFalse(self.post.reviewed)

    def test_title_is_required(self):
        serializer = PostSerializer(data={'content': 'Body only'})
        self.assertFalse(serializer.is_valid())
        self.assertIn('title', serializer.errors)
