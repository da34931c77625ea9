# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import InvalidEntityIDError
from .interfaces import AuthnRequest, SAMLEngine, ServiceProvider
from .mail_address import MailAddressProvider, MailAddressResolver
from .metadata import (
    DOMAIN_PLACEHOLDER,
    domain_from_entity_id,
    gsuite_metadata,
    render_metadata,
)

logger = logging.getLogger(__name__)

GSUITE_PROVIDER_ID = 'wazo_gsuite_sso'


@dataclass(frozen=True)
class ServiceProviderTemplate:
    id: str
    name: str
    metadata: Callable[[str], str]
    configure: Callable[[ServiceProvider], None]


@dataclass(frozen=True)
class AuthnRequestHook:
    id: str
    handler: Callable[[AuthnRequest, ServiceProvider], None]


class GSuiteTemplateRegistrar:
    def __init__(
        self,
        engine: SAMLEngine,
        resolver: MailAddressResolver,
        logger: logging.Logger = logger,
    ):
        self._engine = engine
        self._resolver = resolver
        self._logger = logger

        self.template = ServiceProviderTemplate(
            GSUITE_PROVIDER_ID,
            'G Suite',
            self.template_metadata,
            self.configure_service_provider,
        )
        self.hook = AuthnRequestHook(GSUITE_PROVIDER_ID, self.handle_authn_request)

        engine.register_template(self.template)
        engine.register_hook(self.hook)
        self._logger.debug('G Suite service provider template registered')

    def template_metadata(self, placeholder: str = DOMAIN_PLACEHOLDER) -> str:
        return gsuite_metadata(placeholder)

    def metadata(self, domain: str) -> str:
        return render_metadata(self.template_metadata(), domain)

    def configure_service_provider(self, service_provider: ServiceProvider) -> None:
        service_provider.handler = self.hook.id

    def handle_authn_request(
        self, request: AuthnRequest, service_provider: ServiceProvider
    ) -> None:
        entity_descriptor = service_provider.entity_descriptor()
        try:
            domain = domain_from_entity_id(entity_descriptor.entity_id)
        except InvalidEntityIDError as e:
            self._logger.debug('no domain in service provider entity id: %s', e)
            domain = ''
        self._logger.debug('setting up G Suite authn request for %s', domain)

        request.attribute_providers.append(MailAddressProvider(self._resolver, domain))
        self._engine.request_setup(request, entity_descriptor)
