# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from typing import TypedDict

from .exceptions import OptionAlreadyProvided
from .idp import IdentityProvider
from .interfaces import AdminApp, SAMLEngine
from .mail_address import load_mail_address_finder
from .options import PluginOptions
from .sso import GSuiteSSO
from .synchronizer import DEFAULT_ADMIN_BASE_URL, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class OptionKeys(TypedDict, total=False):
    saml_engine: str
    saml_idp: str
    admin_app: str
    sso_idp: str


class GSuiteSSOConfig(TypedDict, total=False):
    admin_base_url: str
    rotate_signing_key: bool
    check_response_status: bool
    request_timeout: float
    mail_address_finder: str | None
    options: OptionKeys


DEFAULT_OPTION_KEYS: OptionKeys = {
    'saml_engine': 'saml_engine',
    'saml_idp': 'saml_idp',
    'admin_app': 'gsuite_admin_app',
    'sso_idp': 'gsuite_sso_idp',
}


class Plugin:
    def __init__(self, config: dict | None = None):
        self._config: GSuiteSSOConfig = dict((config or {}).get('gsuite_sso') or {})
        keys = dict(DEFAULT_OPTION_KEYS, **(self._config.get('options') or {}))
        self.saml_engine_key = keys['saml_engine']
        self.saml_idp_key = keys['saml_idp']
        self.admin_app_key = keys['admin_app']
        self.sso_idp_key = keys['sso_idp']

    def required_options(self) -> set[str]:
        return {self.saml_engine_key, self.saml_idp_key, self.admin_app_key}

    def provided_options(self) -> set[str]:
        return {self.sso_idp_key}

    def provide_options(self, options: PluginOptions) -> None:
        engine = options.get_typed(self.saml_engine_key, SAMLEngine)
        idp = options.get_typed(self.saml_idp_key, IdentityProvider)
        app = options.get_typed(self.admin_app_key, AdminApp)
        if self.sso_idp_key in options:
            raise OptionAlreadyProvided(self.sso_idp_key)

        finder = None
        if finder_name := self._config.get('mail_address_finder'):
            finder = load_mail_address_finder(finder_name)

        sso = GSuiteSSO(
            engine,
            idp,
            app.client,
            mail_address_finder=finder,
            logger=logger,
            admin_base_url=self._config.get('admin_base_url', DEFAULT_ADMIN_BASE_URL),
            rotate_signing_key=self._config.get('rotate_signing_key', False),
            check_response_status=self._config.get('check_response_status', True),
            timeout=self._config.get('request_timeout', DEFAULT_REQUEST_TIMEOUT),
        )
        sso.configure_app(app)

        options.set(self.sso_idp_key, sso)
        logger.info('G Suite SSO provided as "%s"', self.sso_idp_key)
