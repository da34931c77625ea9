# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

import json
from unittest.mock import patch

from ..client import DomainToken, OAuth2ClientFactory


def test_domain_token_update():
    token = DomainToken('example.com', {'access_token': 'old'})

    token.update({'access_token': 'new'})

    assert token.token == {'access_token': 'new'}


def test_domain_token_from_file(tmp_path):
    filename = tmp_path / 'token.json'
    filename.write_text(json.dumps({'access_token': 'abc', 'token_type': 'Bearer'}))

    token = DomainToken.from_file('example.com', str(filename))

    assert token.domain == 'example.com'
    assert token.token == {'access_token': 'abc', 'token_type': 'Bearer'}


@patch('wazo_gsuite_sso.client.OAuth2Session')
def test_client_factory_without_refresh(session):
    token = DomainToken('example.com', {'access_token': 'abc'})
    factory = OAuth2ClientFactory('client-id')

    client = factory(token)

    assert client is session.return_value
    session.assert_called_once_with('client-id', token={'access_token': 'abc'})


@patch('wazo_gsuite_sso.client.OAuth2Session')
def test_client_factory_with_refresh(session):
    token = DomainToken('example.com', {'access_token': 'abc'})
    factory = OAuth2ClientFactory.from_config(
        {
            'client_id': 'client-id',
            'client_secret': 'secret',
            'token_url': 'https://oauth2.example.com/token',
        }
    )

    factory(token)

    session.assert_called_once_with(
        'client-id',
        token={'access_token': 'abc'},
        auto_refresh_url='https://oauth2.example.com/token',
        auto_refresh_kwargs={'client_id': 'client-id', 'client_secret': 'secret'},
        token_updater=token.update,
    )
