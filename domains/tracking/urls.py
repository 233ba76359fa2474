from django.urls import path

from .views import TrackAPI

app_name = "tracking"

urlpatterns = [
    path("", TrackAPI.as_view(), name="track"),
]
