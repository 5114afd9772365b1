from django.urls import include, path

urlpatterns = [
    path('api/', include('postguard.apps.posts.urls', namespace='posts')),
    path('api/', include(
        'postguard.apps.authentication.urls', namespace='authentication'
    )),
]
