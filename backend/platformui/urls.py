from django.conf import settings
from django.contrib.staticfiles.urls import staticfiles_urlpatterns

# Field editors are embedded by the hosting admin; they expose no routes of their own.
urlpatterns = []

if settings.DEBUG:
    urlpatterns += staticfiles_urlpatterns()
