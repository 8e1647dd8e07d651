import django
from django.conf import settings


def pytest_configure():
    settings.configure(
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            },
        },
        INSTALLED_APPS=['shorttoken', 'shorttoken.tests'],
        DEFAULT_AUTO_FIELD='django.db.models.AutoField',
        USE_TZ=True,
    )
    django.setup()
