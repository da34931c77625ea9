# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging

from stevedore import driver

from .interfaces import MailAddressFinder

logger = logging.getLogger(__name__)

MAIL_ADDRESS_ATTRIBUTE = 'email'


class MailAddressResolver:
    """Find the mailbox address asserted to G Suite for a SAML session

    Without a finder every lookup returns an empty address and no attribute
    is asserted.
    """

    def __init__(self, finder: MailAddressFinder | None = None):
        self.finder = finder

    def find(self, request, session, domain: str) -> str:
        if self.finder is None:
            return ''
        return self.finder.find(request, session, domain)


class MailAddressProvider:
    def __init__(self, resolver: MailAddressResolver, domain: str):
        self.resolver = resolver
        self.domain = domain

    def provide(self, request, session) -> dict[str, list[str]]:
        address = self.resolver.find(request, session, self.domain)
        if not address:
            logger.debug('no mail address found for domain %s', self.domain)
            return {}
        return {MAIL_ADDRESS_ATTRIBUTE: [address]}


class SessionLoginFinder:
    def find(self, request, session, domain: str) -> str:
        user_name = getattr(session, 'user_name', None)
        if not user_name:
            return ''
        if '@' in user_name:
            return user_name
        return f'{user_name}@{domain}'


def load_mail_address_finder(name: str) -> MailAddressFinder:
    logger.info('Loading mail address finder: %s', name)
    return driver.DriverManager(
        namespace='wazo_gsuite_sso.mail_address_finders',
        name=name,
        invoke_on_load=True,
    ).driver
