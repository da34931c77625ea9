# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse

from xivo.chain_map import ChainMap
from xivo.config_helper import read_config_file_hierarchy_accumulating_list
from xivo.xivo_logging import get_log_level_by_name

_DEFAULT_CONFIG = {
    'config_file': '/etc/wazo-gsuite-sso/config.yml',
    'extra_config_files': '/etc/wazo-gsuite-sso/conf.d',
    'debug': False,
    'log_level': 'info',
    'log_filename': '/var/log/wazo-gsuite-sso.log',
    'enabled_plugins': {
        'gsuite_sso': True,
    },
    'gsuite_sso': {
        'admin_base_url': 'https://apps-apis.google.com/a/feeds/domain',
        'rotate_signing_key': False,
        'check_response_status': True,
        'request_timeout': 30,
        'mail_address_finder': None,
        'options': {
            'saml_engine': 'saml_engine',
            'saml_idp': 'saml_idp',
            'admin_app': 'gsuite_admin_app',
            'sso_idp': 'gsuite_sso_idp',
        },
    },
    'saml': {
        'cert_file': '/var/lib/wazo-gsuite-sso/saml/cert.pem',
        'login_url': '',
        'logout_url': '',
        'change_password_url': '',
    },
    'oauth2': {
        'client_id': None,
        'client_secret': None,
        'token_url': 'https://oauth2.googleapis.com/token',
    },
}


def _parse_cli_args(argv):
    parser = argparse.ArgumentParser(
        description='Push the IdP single sign-on settings to a G Suite domain'
    )
    parser.add_argument(
        '-c', '--config-file', action='store', help='The path to the config file'
    )
    parser.add_argument('-d', '--debug', action='store_true', help='Log debug messages')
    parser.add_argument(
        '-l',
        '--log-level',
        action='store',
        help="Logs messages with LOG_LEVEL details. Must be one of:\n"
        "critical, error, warning, info, debug. Default: %(default)s",
    )
    parser.add_argument(
        '--log-file',
        action='store',
        help='The log filename to log to',
    )
    parser.add_argument('--domain', required=True, help='The G Suite domain')
    parser.add_argument(
        '--token-file',
        required=True,
        help='JSON file holding the OAuth2 token of the domain administrator',
    )
    parser.add_argument(
        '--rotate-signing-key',
        action='store_true',
        help='Also upload the IdP signing certificate',
    )
    parsed_args = parser.parse_args(argv)

    result = {
        'domain': parsed_args.domain,
        'token_file': parsed_args.token_file,
    }
    if parsed_args.config_file:
        result['config_file'] = parsed_args.config_file
    if parsed_args.debug:
        result['debug'] = parsed_args.debug
    if parsed_args.log_level:
        result['log_level'] = parsed_args.log_level
    if parsed_args.log_file:
        result['log_filename'] = parsed_args.log_file
    if parsed_args.rotate_signing_key:
        result['gsuite_sso'] = {'rotate_signing_key': True}

    return result


def _get_reinterpreted_raw_values(config):
    result = {}

    log_level = config.get('log_level')
    if log_level:
        result['log_level'] = get_log_level_by_name(log_level)

    return result


def get_config(argv):
    cli_config = _parse_cli_args(argv)
    file_config = read_config_file_hierarchy_accumulating_list(
        ChainMap(cli_config, _DEFAULT_CONFIG)
    )
    reinterpreted_config = _get_reinterpreted_raw_values(
        ChainMap(cli_config, file_config, _DEFAULT_CONFIG)
    )
    return ChainMap(reinterpreted_config, cli_config, file_config, _DEFAULT_CONFIG)
