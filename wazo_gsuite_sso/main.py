# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import sys

from xivo import xivo_logging

from wazo_gsuite_sso.client import DomainToken, OAuth2ClientFactory
from wazo_gsuite_sso.config import get_config
from wazo_gsuite_sso.exceptions import SynchronizationError
from wazo_gsuite_sso.idp import IdentityProvider
from wazo_gsuite_sso.synchronizer import SSOSettingsSynchronizer

SPAMMY_LOGGERS = ['urllib3', 'requests_oauthlib', 'oauthlib']

logger = logging.getLogger(__name__)


def main():
    xivo_logging.silence_loggers(SPAMMY_LOGGERS, logging.WARNING)

    config = get_config(sys.argv[1:])

    xivo_logging.setup_logging(
        config['log_filename'],
        debug=config['debug'],
        log_level=config['log_level'],
    )

    sso_config = config['gsuite_sso']
    synchronizer = SSOSettingsSynchronizer(
        IdentityProvider.from_config(config['saml']),
        OAuth2ClientFactory.from_config(config['oauth2']),
        admin_base_url=sso_config['admin_base_url'],
        rotate_signing_key=sso_config['rotate_signing_key'],
        check_response_status=sso_config['check_response_status'],
        timeout=sso_config['request_timeout'],
    )
    token = DomainToken.from_file(config['domain'], config['token_file'])

    logger.info('[%s] synchronizing SSO settings', token.domain)
    try:
        synchronizer.synchronize(token)
    except SynchronizationError as e:
        logger.error('[%s] synchronization failed: %s', token.domain, e)
        sys.exit(1)
    logger.info('[%s] SSO settings synchronized', token.domain)
