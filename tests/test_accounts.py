"""
Tests for signup, login and bearer tokens.
"""

import json
from unittest import mock

from django.core import signing
from django.test import TestCase, override_settings
from django.urls import reverse

from apps.accounts.tokens import issue_token, read_token
from tests.helpers import auth_header, make_user


class SignupTests(TestCase):

    def _post(self, payload):
        return self.client.post(
            reverse('accounts:signup'), json.dumps(payload), content_type='application/json'
        )

    def test_signup_creates_user_with_hashed_password(self):
        response = self._post({'name': 'Ada', 'email': 'ada@example.com', 'password': 'pw-123456'})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['user']['email'], 'ada@example.com')
        self.assertNotIn('password', body['user'])

    def test_duplicate_email_conflicts(self):
        make_user('Ada', email='ada@example.com')
        response = self._post({'name': 'Ada 2', 'email': 'ada@example.com', 'password': 'x'})
        self.assertEqual(response.status_code, 409)

    def test_missing_fields(self):
        response = self._post({'email': 'ada@example.com', 'password': 'x'})
        self.assertEqual(response.status_code, 400)

    def test_non_string_fields_are_rejected(self):
        for payload in (
            {'name': 42, 'email': 'ada@example.com', 'password': 'x'},
            {'name': 'Ada', 'email': 42, 'password': 'x'},
            {'name': 'Ada', 'email': 'ada@example.com', 'password': 42},
        ):
            with self.subTest(payload=payload):
                self.assertEqual(self._post(payload).status_code, 400)

    def test_malformed_json(self):
        response = self.client.post(
            reverse('accounts:signup'), '{nope', content_type='application/json'
        )
        self.assertEqual(response.status_code, 400)


class LoginTests(TestCase):

    def setUp(self):
        self.user = make_user('Ada', email='ada@example.com', password='correct-horse')

    def _login(self, email, password):
        return self.client.post(
            reverse('accounts:login'),
            json.dumps({'email': email, 'password': password}),
            content_type='application/json',
        )

    def test_login_returns_token_for_user(self):
        response = self._login('ada@example.com', 'correct-horse')
        self.assertEqual(response.status_code, 200)
        payload = read_token(response.json()['token'])
        self.assertEqual(payload, {'name': 'Ada', 'email': 'ada@example.com'})

    def test_wrong_password_is_rejected(self):
        response = self._login('ada@example.com', 'battery-staple')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['error'], 'Invalid Credentials')

    def test_unknown_email_is_rejected(self):
        self.assertEqual(self._login('bob@example.com', 'correct-horse').status_code, 404)

    def test_non_string_credentials_are_rejected(self):
        self.assertEqual(self._login(42, 'correct-horse').status_code, 404)
        self.assertEqual(self._login('ada@example.com', 42).status_code, 404)


class TokenRequiredTests(TestCase):

    def setUp(self):
        self.user = make_user('Ada', email='ada@example.com')

    def test_missing_token(self):
        response = self.client.get(reverse('accounts:me'))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()['message'], 'No Token provided')

    def test_tampered_token(self):
        response = self.client.get(
            reverse('accounts:me'), HTTP_AUTHORIZATION=issue_token(self.user) + 'x'
        )
        self.assertEqual(response.status_code, 401)

    def test_token_with_and_without_bearer_prefix(self):
        token = issue_token(self.user)
        for header in (token, f'Bearer {token}'):
            response = self.client.get(reverse('accounts:me'), HTTP_AUTHORIZATION=header)
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()['email'], 'ada@example.com')

    @override_settings(AUTH_TOKEN_MAX_AGE=60)
    def test_expired_token(self):
        token = issue_token(self.user)
        with mock.patch('django.core.signing.time.time', return_value=10**12):
            with self.assertRaises(signing.SignatureExpired):
                read_token(token)

    def test_token_for_inactive_user(self):
        header = auth_header(self.user)
        self.user.is_active = False
        self.user.save()
        self.assertEqual(self.client.get(reverse('accounts:me'), **header).status_code, 401)

    def test_user_list(self):
        make_user('Bob', email='bob@example.com')
        response = self.client.get(reverse('accounts:user_list'), **auth_header(self.user))
        self.assertEqual([u['name'] for u in response.json()['users']], ['Ada', 'Bob'])
