from django.urls import path
from .views import MeAddressView, MeView

urlpatterns = [
    path("me/", MeView.as_view(), name="users-me"),
    path("me/address/", MeAddressView.as_view(), name="users-me-address"),
]
