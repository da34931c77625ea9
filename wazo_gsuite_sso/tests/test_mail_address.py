# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from unittest import TestCase
from unittest.mock import Mock, patch
from unittest.mock import sentinel as s

import pytest
from hamcrest import assert_that, equal_to, has_entries, is_

from ..mail_address import (
    MailAddressProvider,
    MailAddressResolver,
    SessionLoginFinder,
    load_mail_address_finder,
)


@pytest.mark.parametrize(
    'request_, session, domain',
    [
        (None, None, ''),
        (s.request, s.session, 'example.com'),
        (Mock(), Mock(user_name='alice'), 'other.example.com'),
    ],
)
def test_resolver_without_finder(request_, session, domain):
    resolver = MailAddressResolver()

    assert resolver.find(request_, session, domain) == ''


class TestMailAddressResolver(TestCase):
    def setUp(self):
        self.finder = Mock()
        self.resolver = MailAddressResolver(self.finder)

    def test_find_delegates_to_finder(self):
        self.finder.find.return_value = 'alice@example.com'

        result = self.resolver.find(s.request, s.session, 'example.com')

        assert_that(result, equal_to('alice@example.com'))
        self.finder.find.assert_called_once_with(s.request, s.session, 'example.com')

    def test_find_propagates_finder_errors(self):
        self.finder.find.side_effect = LookupError('no such user')

        with pytest.raises(LookupError):
            self.resolver.find(s.request, s.session, 'example.com')

    def test_provider_with_address(self):
        self.finder.find.return_value = 'alice@example.com'
        provider = MailAddressProvider(self.resolver, 'example.com')

        result = provider.provide(s.request, s.session)

        assert_that(result, has_entries(email=['alice@example.com']))

    def test_provider_without_address(self):
        provider = MailAddressProvider(MailAddressResolver(), 'example.com')

        assert_that(provider.provide(s.request, s.session), equal_to({}))


class TestSessionLoginFinder(TestCase):
    def setUp(self):
        self.finder = SessionLoginFinder()

    def test_login_completed_with_domain(self):
        session = Mock(user_name='alice')

        result = self.finder.find(s.request, session, 'example.com')

        assert_that(result, equal_to('alice@example.com'))

    def test_login_already_an_address(self):
        session = Mock(user_name='alice@corp.example.com')

        result = self.finder.find(s.request, session, 'example.com')

        assert_that(result, equal_to('alice@corp.example.com'))

    def test_no_login(self):
        session = Mock(user_name=None)

        assert_that(self.finder.find(s.request, session, 'example.com'), is_(''))


@patch('wazo_gsuite_sso.mail_address.driver.DriverManager')
def test_load_mail_address_finder(driver_manager):
    driver_manager.return_value.driver = s.finder

    finder = load_mail_address_finder('session_login')

    assert finder is s.finder
    driver_manager.assert_called_once_with(
        namespace='wazo_gsuite_sso.mail_address_finders',
        name='session_login',
        invoke_on_load=True,
    )
