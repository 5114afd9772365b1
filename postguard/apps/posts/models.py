from django.conf import settings
from django.db import models

from postguard.apps.authorization.ownership import identity_of
from postguard.apps.core.models import TimestampedModel


class PostQuerySet(models.QuerySet):
    def owned_by(self, actor):
        """
        Posts belonging to ``actor``. An anonymous actor owns nothing, so
        the result is empty rather than an error.
        """
        identity = identity_of(actor)

        if identity is None:
            return self.none()

        return self.filter(owner_id=identity)


class Post(TimestampedModel):
    # Set from the authenticated actor when the post is created. No endpoint
    # accepts it as input afterwards.
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts'
    )

    title = models.CharField(max_length=255)
    content = models.TextField()

    reviewed = models.BooleanField(default=False)

    objects = PostQuerySet.as_manager()

    def __str__(self):
        return self.title
