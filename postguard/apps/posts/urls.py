from django.urls import include, path

from rest_framework.routers import SimpleRouter

from .views import InlinePostViewSet, PostViewSet

app_name = 'posts'

router = SimpleRouter(trailing_slash=False)
router.register(r'posts', PostViewSet)
router.register(r'inline/posts', InlinePostViewSet, basename='inline-post')

urlpatterns = [
    path('', include(router.urls)),
]
