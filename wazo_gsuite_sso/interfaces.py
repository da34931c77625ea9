# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    import requests
    from saml2.md import EntityDescriptor

    from .client import DomainToken
    from .saml import AuthnRequestHook, ServiceProviderTemplate

ScopeAppender = Callable[[Any, set, Any], None]
SetupHandler = Callable[[Any, Any, Any], None]


class AuthnRequest(Protocol):
    attribute_providers: list
    """
    Attribute providers consulted when the assertion for this request is built
    """


class ServiceProvider(Protocol):
    handler: str | None
    """
    Identifier of the authn request hook applied to requests for this provider
    """

    def entity_descriptor(self) -> EntityDescriptor:
        ...


@runtime_checkable
class SAMLEngine(Protocol):
    def register_template(self, template: ServiceProviderTemplate) -> None:
        ...

    def register_hook(self, hook: AuthnRequestHook) -> None:
        ...

    def request_setup(
        self, request: AuthnRequest, entity_descriptor: EntityDescriptor
    ) -> None:
        """
        Apply the provider specific settings (NameID policy, audience...) to
        an incoming authn request
        """
        ...


@runtime_checkable
class AdminApp(Protocol):
    def add_scope_appender(self, appender: ScopeAppender) -> None:
        ...

    def set_setup_handler(self, handler: SetupHandler) -> None:
        """
        Register the callback invoked once a token has been obtained for a domain
        """
        ...

    def client(self, token: DomainToken) -> requests.Session:
        """
        Return an HTTP session authenticated with the domain token
        """
        ...


class MailAddressFinder(Protocol):
    def find(self, request: AuthnRequest, session: Any, domain: str) -> str:
        """
        Return the mailbox address of the session's user in the given domain,
        or an empty string when it cannot be determined
        """
        ...
