from decimal import Decimal

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.carts.models import Cart, CartProduct
from apps.catalog.models import Product
from apps.users.models import User


class TestCartFlow(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='cartuser',
            password='TestPass123',
            email='cart@example.com',
            wallet_money=Decimal('100.00'),
            address='12 Long Road, Springfield 5555',
        )
        self.cart_url = reverse('api-cart')
        self.checkout_url = reverse('api-cart-checkout')
        self.product_a = Product.objects.create(name='Widget', category='Tools', cost=Decimal('10.00'))
        self.product_b = Product.objects.create(name='Gadget', category='Tools', cost=Decimal('5.00'))
        self.product_c = Product.objects.create(name='Gizmo', category='Toys', cost=Decimal('1.00'))

    def _auth(self, username='cartuser', password='TestPass123'):
        login = self.client.post(
            reverse('auth-login'), {'username': username, 'password': password}, format='json'
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

    def _add(self, product, quantity):
        return self.client.post(
            self.cart_url, {'productId': product.id, 'quantity': quantity}, format='json'
        )

    def test_requires_authentication(self):
        response = self.client.get(self.cart_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_get_without_cart_returns_404(self):
        self._auth()
        response = self.client.get(self.cart_url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error']['message'], 'User does not have a cart')

    def test_add_creates_single_cart_keyed_by_email(self):
        self._auth()
        first = self._add(self.product_a, 2)
        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self._add(self.product_b, 1)
        self.assertEqual(Cart.objects.filter(email='cart@example.com').count(), 1)
        cart = self.client.get(self.cart_url)
        self.assertEqual(cart.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [(i['product']['id'], i['quantity']) for i in cart.data['cartItems']],
            [(self.product_a.id, 2), (self.product_b.id, 1)],
        )
        self.assertEqual(cart.data['total'], '25.00')

    def test_add_duplicate_product_rejected(self):
        self._auth()
        self._add(self.product_a, 1)
        response = self._add(self.product_a, 3)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(CartProduct.objects.count(), 1)

    def test_add_unknown_product_rejected(self):
        self._auth()
        response = self.client.post(self.cart_url, {'productId': 9999, 'quantity': 1}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['message'], "Product doesn't exist in database")
        self.assertFalse(Cart.objects.exists())

    def test_update_and_remove_preserve_order(self):
        self._auth()
        for product in (self.product_a, self.product_b, self.product_c):
            self._add(product, 1)
        update = self.client.put(
            self.cart_url, {'productId': self.product_b.id, 'quantity': 4}, format='json'
        )
        self.assertEqual(update.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [i['quantity'] for i in update.data['cartItems']], [1, 4, 1]
        )
        removed = self.client.put(
            self.cart_url, {'productId': self.product_a.id, 'quantity': 0}, format='json'
        )
        self.assertEqual(removed.status_code, status.HTTP_204_NO_CONTENT)
        deleted = self.client.delete(reverse('api-cart-product', args=[self.product_c.id]))
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        cart = self.client.get(self.cart_url)
        self.assertEqual(
            [(i['product']['id'], i['quantity']) for i in cart.data['cartItems']],
            [(self.product_b.id, 4)],
        )

    def test_update_product_not_in_cart_rejected(self):
        self._auth()
        self._add(self.product_a, 1)
        response = self.client.put(
            self.cart_url, {'productId': self.product_b.id, 'quantity': 2}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['message'], 'Product not in cart')

    def test_checkout_debits_wallet_and_empties_cart(self):
        self._auth()
        self._add(self.product_a, 2)
        self._add(self.product_b, 1)
        response = self.client.put(self.checkout_url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.user.refresh_from_db()
        self.assertEqual(self.user.wallet_money, Decimal('75.00'))
        self.assertEqual(self.client.get(self.cart_url).data['cartItems'], [])
        self.assertTrue(Cart.objects.filter(email='cart@example.com').exists())

    def test_checkout_with_default_address_rejected(self):
        self.user.address = settings.DEFAULT_ADDRESS
        self.user.save()
        self._auth()
        self._add(self.product_a, 1)
        response = self.client.put(self.checkout_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['message'], 'ADDRESS_NOT_SET')
        self.user.refresh_from_db()
        self.assertEqual(self.user.wallet_money, Decimal('100.00'))

    def test_checkout_with_insufficient_balance_rejected(self):
        self._auth()
        self._add(self.product_a, 11)
        response = self.client.put(self.checkout_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['message'], 'wallet balance is insufficient')
        self.user.refresh_from_db()
        self.assertEqual(self.user.wallet_money, Decimal('100.00'))
        self.assertEqual(CartProduct.objects.count(), 1)

    def test_checkout_without_cart_returns_404(self):
        self._auth()
        response = self.client.put(self.checkout_url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_carts_are_isolated_per_user(self):
        User.objects.create_user(username='other', password='TestPass123', email='other@example.com')
        self._auth()
        self._add(self.product_a, 1)
        self._auth(username='other')
        response = self.client.get(self.cart_url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_checkout_with_blank_address_rejected(self):
        self.user.address = '   '
        self.user.save()
        self._auth()
        self._add(self.product_a, 1)
        response = self.client.put(self.checkout_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error']['message'], 'ADDRESS_NOT_SET')
        self.user.refresh_from_db()
        self.assertEqual(self.user.wallet_money, Decimal('100.00'))
        self.assertEqual(CartProduct.objects.count(), 1)
