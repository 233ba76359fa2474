from django.urls import path

from .views import CarrierListAPI

app_name = "carriers"

urlpatterns = [
    path("", CarrierListAPI.as_view(), name="carrier-list"),
]
