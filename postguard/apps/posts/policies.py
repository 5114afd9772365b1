from django.conf import settings

from postguard.apps.authorization import Gate, OwnershipPolicy, allow_superusers

from .models import Post


class PostPolicy(OwnershipPolicy):
    """
    Who may do what with a blog post.

    Listing is open to everyone (which rows the list holds is decided by
    the query, see ``PostQuerySet.owned_by``). Creating needs an
    authenticated actor. Viewing, editing, deleting and reviewing a single
    post are reserved for its owner.
    """

    actions = ('view_any', 'view', 'create', 'update', 'delete', 'review')

    messages = {
        'view': 'You are not allowed to view this post.',
        'create': 'You must be logged in to create a post.',
        'update': 'You are not allowed to edit this post.',
        'delete': 'You are not allowed to delete this post.',
        'review': 'You are not allowed to review this post.',
    }

    def review(self, actor, post):
        return self.owns(actor, post)


def build_post_gate(superuser_bypass=None):
    if superuser_bypass is None:
        superuser_bypass = settings.POSTGUARD['SUPERUSER_BYPASS']

    gate = Gate()
    gate.register_policy(Post, PostPolicy())

    if superuser_bypass:
        gate.before(allow_superusers)

    return gate
