# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging

from .client import DomainToken
from .idp import IdentityProvider
from .interfaces import AdminApp, MailAddressFinder, SAMLEngine
from .mail_address import MailAddressResolver
from .saml import GSuiteTemplateRegistrar
from .synchronizer import ClientFactory, SSOSettingsSynchronizer

logger = logging.getLogger(__name__)

# See https://developers.google.com/admin-sdk/admin-settings/auth
GSUITE_ADMIN_SETTINGS_SCOPE = 'https://apps-apis.google.com/a/feeds/domain/'
ADMIN_DIRECTORY_USER_SCOPE = 'https://www.googleapis.com/auth/admin.directory.user'


class GSuiteSSO:
    def __init__(
        self,
        engine: SAMLEngine,
        idp: IdentityProvider,
        client_factory: ClientFactory,
        mail_address_finder: MailAddressFinder | None = None,
        logger: logging.Logger = logger,
        **synchronizer_kwargs,
    ):
        self.idp = idp
        self._logger = logger
        self.resolver = MailAddressResolver(mail_address_finder)
        self.registrar = GSuiteTemplateRegistrar(engine, self.resolver, logger=logger)
        self.synchronizer = SSOSettingsSynchronizer(
            idp, client_factory, logger=logger, **synchronizer_kwargs
        )

    @property
    def mail_address_finder(self) -> MailAddressFinder | None:
        return self.resolver.finder

    @mail_address_finder.setter
    def mail_address_finder(self, finder: MailAddressFinder | None) -> None:
        self.resolver.finder = finder

    def configure_app(self, app: AdminApp) -> None:
        app.add_scope_appender(self.app_scope_appender)
        app.set_setup_handler(self.app_setup_handler)

    def app_scope_appender(self, app: AdminApp, scopes: set, request) -> None:
        scopes.update((GSUITE_ADMIN_SETTINGS_SCOPE, ADMIN_DIRECTORY_USER_SCOPE))

    def app_setup_handler(self, app: AdminApp, token: DomainToken, request) -> None:
        prefix = f'[{_site_name(request)}@{token.domain}] setup'
        self._logger.debug('%s: start', prefix)
        try:
            self.synchronizer.synchronize(token)
        except Exception as e:
            self._logger.error('%s: failed: %s', prefix, e)
            raise
        self._logger.debug('%s: done', prefix)


def _site_name(request) -> str:
    return getattr(request, 'host', None) or 'default'
