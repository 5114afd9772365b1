from postguard.apps.authentication.models import User
from postguard.apps.posts.models import Post


def make_user(username='postuser', email=None, password='testpass123'):
    return User.objects.create_user(
        username=username,
        email=email or '{}@test.com'.format(username),
        password=password,
    )


def make_post(owner, title='Test Post Title', content='Test post content.'):
    return Post.objects.create(owner=owner, title=title, content=content)


def post_data(**overrides):
    data = {
        'title': 'Test Post Title',
        'content': 'Test post content for testing purposes.',
    }
    data.update(overrides)
    return {'post': data}


def invalid_post_data():
    return {'post': {'title': '', 'content': ''}}


def oversized_post_data():
    return post_data(title='a' * 256)
