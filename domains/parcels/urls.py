from django.urls import path

from .views import ParcelUpdatesAPI

app_name = "parcels"

urlpatterns = [
    path("", ParcelUpdatesAPI.as_view(), name="parcel-updates"),
]
