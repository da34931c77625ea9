# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import requests
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from .client import DomainToken
from .exceptions import FetchFailedError, TransportError, UpdateFailedError
from .idp import IdentityProvider
from .settings import CONTENT_TYPE, DesiredSSOSettings, SigningKeyPayload

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_BASE_URL = 'https://apps-apis.google.com/a/feeds/domain'
DEFAULT_REQUEST_TIMEOUT = 30

ClientFactory = Callable[[DomainToken], requests.Session]


class SyncState(enum.Enum):
    START = 'start'
    SEND_SSO_UPDATE = 'update'
    VERIFY = 'verify'
    SEND_KEY_UPDATE = 'rotate-key'
    DONE = 'done'
    FAILED = 'failed'


class SSOSettingsSynchronizer:
    """Push the IdP single sign-on settings to a G Suite domain

    One invocation sends the settings, reads them back and, when enabled,
    uploads the IdP signing certificate. Invocations are not serialized: two
    concurrent runs for the same domain interleave and the last write wins.
    """

    def __init__(
        self,
        idp: IdentityProvider,
        client_factory: ClientFactory,
        admin_base_url: str = DEFAULT_ADMIN_BASE_URL,
        rotate_signing_key: bool = False,
        check_response_status: bool = True,
        timeout: float | None = DEFAULT_REQUEST_TIMEOUT,
        logger: logging.Logger = logger,
    ):
        self._idp = idp
        self._client_factory = client_factory
        self._admin_base_url = admin_base_url.rstrip('/')
        self._rotate_signing_key = rotate_signing_key
        self._check_response_status = check_response_status
        self._timeout = timeout
        self._logger = logger

    def settings_url(self, domain: str) -> str:
        return f'{self._admin_base_url}/2.0/{domain}/sso/general'

    def signing_key_url(self, domain: str) -> str:
        return f'{self._admin_base_url}/2.0/{domain}/sso/signingkey'

    def synchronize(self, token: DomainToken) -> SyncState:
        steps = [
            (SyncState.SEND_SSO_UPDATE, self._send_sso_update),
            (SyncState.VERIFY, self._verify),
        ]
        if self._rotate_signing_key:
            steps.append((SyncState.SEND_KEY_UPDATE, self._send_key_update))

        state = SyncState.START
        with self._client_factory(token) as client:
            for next_state, step in steps:
                self._transition(token.domain, state, next_state)
                state = next_state
                try:
                    step(client, token.domain)
                except Exception:
                    self._transition(token.domain, state, SyncState.FAILED)
                    raise

        self._transition(token.domain, state, SyncState.DONE)
        return SyncState.DONE

    def _transition(self, domain, current, next_):
        self._logger.debug('[%s] sso sync %s -> %s', domain, current.value, next_.value)

    def _send_sso_update(self, client, domain):
        settings = DesiredSSOSettings.from_idp(self._idp)
        body = settings.to_xml()
        self._logger.debug('[%s] new settings: %s', domain, body.decode())
        response = self._request(
            client, 'PUT', self.settings_url(domain), SyncState.SEND_SSO_UPDATE, body
        )
        if self._check_response_status and not response.ok:
            raise UpdateFailedError(
                SyncState.SEND_SSO_UPDATE.value, response.status_code, response.text
            )

    def _verify(self, client, domain):
        response = self._request(
            client, 'GET', self.settings_url(domain), SyncState.VERIFY
        )
        if self._check_response_status and not response.ok:
            raise FetchFailedError(
                SyncState.VERIFY.value, response.status_code, response.text
            )

    def _send_key_update(self, client, domain):
        self._logger.debug('[%s] update signing key', domain)
        body = SigningKeyPayload.from_idp(self._idp).to_xml()
        response = self._request(
            client, 'PUT', self.signing_key_url(domain), SyncState.SEND_KEY_UPDATE, body
        )
        if self._check_response_status and not response.ok:
            raise UpdateFailedError(
                SyncState.SEND_KEY_UPDATE.value, response.status_code, response.text
            )

    def _request(self, client, method, url, state, body=None):
        headers = {'Content-Type': CONTENT_TYPE} if body is not None else None
        try:
            response = client.request(
                method, url, data=body, headers=headers, timeout=self._timeout
            )
        except (requests.RequestException, OAuth2Error) as e:
            raise TransportError(state.value, e)

        self._logger.debug(
            '%s %s: %s %s', method, url, response.status_code, response.text
        )
        return response
