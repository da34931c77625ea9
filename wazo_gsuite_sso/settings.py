# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from xml.etree import ElementTree

from .idp import IdentityProvider

# See https://developers.google.com/admin-sdk/admin-settings/#managing_single_sign-on_settings
ATOM_NAMESPACE = 'http://www.w3.org/2005/Atom'
APPS_NAMESPACE = 'http://schemas.google.com/apps/2006'
CONTENT_TYPE = 'application/atom+xml'


def _format_value(value: bool | str) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def _entry(properties: list[tuple[str, bool | str]]) -> bytes:
    entry = ElementTree.Element(
        'atom:entry', {'xmlns:atom': ATOM_NAMESPACE, 'xmlns:apps': APPS_NAMESPACE}
    )
    for name, value in properties:
        ElementTree.SubElement(
            entry,
            'apps:property',
            {'name': name, 'value': _format_value(value)},
        )
    return ElementTree.tostring(entry, encoding='utf-8', xml_declaration=False)


def parse_entry(body: bytes | str) -> dict[str, str]:
    entry = ElementTree.fromstring(body)
    return {
        prop.get('name'): prop.get('value')
        for prop in entry.iter(f'{{{APPS_NAMESPACE}}}property')
    }


@dataclass(frozen=True)
class DesiredSSOSettings:
    saml_signon_uri: str
    saml_logout_uri: str
    change_password_uri: str
    enable_sso: bool = True
    sso_whitelist: str = ''
    use_domain_specific_issuer: bool = False

    @classmethod
    def from_idp(cls, idp: IdentityProvider) -> DesiredSSOSettings:
        return cls(
            saml_signon_uri=idp.login_url,
            saml_logout_uri=idp.logout_url,
            change_password_uri=idp.change_password_url,
        )

    def properties(self) -> list[tuple[str, bool | str]]:
        return [
            ('enableSSO', self.enable_sso),
            ('samlSignonUri', self.saml_signon_uri),
            ('samlLogoutUri', self.saml_logout_uri),
            ('changePasswordUri', self.change_password_uri),
            ('ssoWhitelist', self.sso_whitelist),
            ('useDomainSpecificIssuer', self.use_domain_specific_issuer),
        ]

    def to_xml(self) -> bytes:
        return _entry(self.properties())


@dataclass(frozen=True)
class SigningKeyPayload:
    signing_key: str

    @classmethod
    def from_idp(cls, idp: IdentityProvider) -> SigningKeyPayload:
        return cls(signing_key=idp.encoded_certificate())

    def to_xml(self) -> bytes:
        return _entry([('signingKey', self.signing_key)])
