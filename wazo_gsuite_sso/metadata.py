# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from jinja2 import Environment, StrictUndefined
from saml2 import BINDING_HTTP_POST, md, samlp
from saml2.saml import NAMEID_FORMAT_EMAILADDRESS

from .exceptions import InvalidEntityIDError

DOMAIN_PLACEHOLDER = '{{ domain }}'
ENTITY_ID_PREFIX = 'google.com/a/'

_environment = Environment(undefined=StrictUndefined, autoescape=True)


def gsuite_metadata(domain: str) -> str:
    descriptor = md.EntityDescriptor(
        entity_id=f'{ENTITY_ID_PREFIX}{domain}',
        spsso_descriptor=[
            md.SPSSODescriptor(
                protocol_support_enumeration=samlp.NAMESPACE,
                name_id_format=[md.NameIDFormat(text=NAMEID_FORMAT_EMAILADDRESS)],
                assertion_consumer_service=[
                    md.AssertionConsumerService(
                        binding=BINDING_HTTP_POST,
                        location=f'https://www.google.com/a/{domain}/acs',
                        index='1',
                    )
                ],
            )
        ],
    )
    return descriptor.to_string().decode('utf-8')


def render_metadata(template: str, domain: str) -> str:
    return _environment.from_string(template).render(domain=domain)


def domain_from_entity_id(entity_id: str) -> str:
    if not entity_id or not entity_id.startswith(ENTITY_ID_PREFIX):
        raise InvalidEntityIDError(entity_id)

    domain = entity_id[len(ENTITY_ID_PREFIX) :].strip('/')
    if not domain:
        raise InvalidEntityIDError(entity_id)
    return domain
