# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, TypedDict

from requests_oauthlib import OAuth2Session

logger = logging.getLogger(__name__)

# Allow token scope to not match requested scope.
# (Requests-OAuthlib raises exception on scope mismatch by default.)
os.environ['OAUTHLIB_RELAX_TOKEN_SCOPE'] = '1'


class OAuth2Config(TypedDict, total=False):
    client_id: str
    client_secret: str
    token_url: str


@dataclass
class DomainToken:
    domain: str
    token: dict[str, Any]

    def update(self, token: dict[str, Any]) -> None:
        logger.debug('token refreshed for domain %s', self.domain)
        self.token = token

    @classmethod
    def from_file(cls, domain: str, filename: str) -> DomainToken:
        with open(filename) as f:
            return cls(domain, json.load(f))


class OAuth2ClientFactory:
    def __init__(self, client_id, client_secret=None, token_url=None):
        self._client_id = client_id
        self._client_secret = client_secret
        self._token_url = token_url

    @classmethod
    def from_config(cls, config: OAuth2Config) -> OAuth2ClientFactory:
        return cls(
            config['client_id'],
            client_secret=config.get('client_secret'),
            token_url=config.get('token_url'),
        )

    def __call__(self, token: DomainToken) -> OAuth2Session:
        if not self._token_url:
            return OAuth2Session(self._client_id, token=token.token)

        return OAuth2Session(
            self._client_id,
            token=token.token,
            auto_refresh_url=self._token_url,
            auto_refresh_kwargs={
                'client_id': self._client_id,
                'client_secret': self._client_secret,
            },
            token_updater=token.update,
        )
