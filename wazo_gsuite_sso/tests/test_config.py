# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from unittest import TestCase

from hamcrest import assert_that, equal_to, has_entries, is_not, has_key

from ..config import _parse_cli_args


class TestParseCLIArgs(TestCase):
    def test_required_args(self):
        result = _parse_cli_args(['--domain', 'example.com', '--token-file', 't.json'])

        assert_that(
            result, equal_to({'domain': 'example.com', 'token_file': 't.json'})
        )

    def test_optional_args(self):
        result = _parse_cli_args(
            [
                '--domain',
                'example.com',
                '--token-file',
                't.json',
                '-c',
                '/tmp/config.yml',
                '-d',
                '--log-level',
                'warning',
                '--rotate-signing-key',
            ]
        )

        assert_that(
            result,
            has_entries(
                config_file='/tmp/config.yml',
                debug=True,
                log_level='warning',
                gsuite_sso={'rotate_signing_key': True},
            ),
        )
        assert_that(result, is_not(has_key('log_filename')))
