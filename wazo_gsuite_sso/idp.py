# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import TypedDict

from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding

logger = logging.getLogger(__name__)


class IdentityProviderConfig(TypedDict, total=False):
    cert_file: str
    login_url: str
    logout_url: str
    change_password_url: str


@dataclass(frozen=True)
class IdentityProvider:
    certificate: bytes
    """
    DER encoded signing certificate
    """
    login_url: str = ''
    logout_url: str = ''
    change_password_url: str = ''

    @classmethod
    def from_config(cls, config: IdentityProviderConfig) -> IdentityProvider:
        with open(config['cert_file'], 'rb') as f:
            certificate = x509.load_pem_x509_certificate(f.read())

        logger.debug(
            'Loaded IdP signing certificate %s (subject: %s)',
            config['cert_file'],
            certificate.subject.rfc4514_string(),
        )
        return cls(
            certificate=certificate.public_bytes(Encoding.DER),
            login_url=config.get('login_url') or '',
            logout_url=config.get('logout_url') or '',
            change_password_url=config.get('change_password_url') or '',
        )

    def encoded_certificate(self) -> str:
        return base64.b64encode(self.certificate).decode('ascii')
