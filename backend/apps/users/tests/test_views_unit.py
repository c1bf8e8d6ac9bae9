import types
import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory, force_authenticate

from apps.users.dtos import UserDTO
from apps.users.views import MeAddressView, MeView


def make_dto(**overrides):
    data = dict(
        id=3,
        username="shopper",
        email="shopper@example.com",
        first_name="",
        last_name="",
        wallet_money="500.00",
        address="ADDRESS_NOT_SET",
        address_set=False,
        date_joined="2025-01-01T00:00:00+00:00",
    )
    data.update(overrides)
    return UserDTO(**data)


class UserViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = types.SimpleNamespace(id=3, is_authenticated=True)

    def test_me_returns_wallet_and_address(self):
        service_mock = Mock()
        service_mock.get_profile.return_value = make_dto()
        with patch.object(MeView, "service", service_mock):
            request = self.factory.get("/api/users/me/")
            force_authenticate(request, user=self.user)
            response = MeView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["walletMoney"], "500.00")
        self.assertFalse(response.data["addressSet"])
        service_mock.get_profile.assert_called_once_with(3)

    def test_me_requires_authentication(self):
        request = self.factory.get("/api/users/me/")
        response = MeView.as_view()(request)
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data["error"]["code"], "UNAUTHORIZED")

    def test_set_address_rejects_short_address(self):
        service_mock = Mock()
        with patch.object(MeAddressView, "service", service_mock):
            request = self.factory.put("/api/users/me/address/", {"address": "short"}, format="json")
            force_authenticate(request, user=self.user)
            response = MeAddressView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service_mock.set_address.assert_not_called()

    def test_set_address_rejects_default_placeholder(self):
        service_mock = Mock()
        with patch.object(MeAddressView, "service", service_mock), patch(
            "apps.users.validators.settings"
        ) as mock_settings:
            mock_settings.DEFAULT_ADDRESS = "THE DEFAULT ADDRESS PLACEHOLDER"
            request = self.factory.put(
                "/api/users/me/address/",
                {"address": "THE DEFAULT ADDRESS PLACEHOLDER"},
                format="json",
            )
            force_authenticate(request, user=self.user)
            response = MeAddressView.as_view()(request)
        self.assertEqual(response.status_code, 400)
        service_mock.set_address.assert_not_called()

    def test_set_address_delegates_to_service(self):
        address = "12 Long Road, Springfield 5555"
        service_mock = Mock()
        service_mock.set_address.return_value = make_dto(address=address, address_set=True)
        with patch.object(MeAddressView, "service", service_mock):
            request = self.factory.put("/api/users/me/address/", {"address": address}, format="json")
            force_authenticate(request, user=self.user)
            response = MeAddressView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["addressSet"])
        service_mock.set_address.assert_called_once_with(3, address)
