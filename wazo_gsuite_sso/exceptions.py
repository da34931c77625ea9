# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later


class MissingDependencyError(Exception):
    def __init__(self, key):
        self.key = key
        super().__init__(f'missing required option "{key}"')


class TypeMismatchError(Exception):
    def __init__(self, key, expected, value):
        self.key = key
        self.expected = expected
        expected_name = getattr(expected, '__name__', str(expected))
        super().__init__(
            f'option "{key}" should be a {expected_name}, got {type(value).__name__}'
        )


class OptionAlreadyProvided(Exception):
    def __init__(self, key):
        self.key = key
        super().__init__(f'option "{key}" has already been provided')


class InvalidEntityIDError(Exception):
    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f'not a G Suite entity id: "{entity_id}"')


class SynchronizationError(Exception):
    def __init__(self, step, msg):
        self.step = step
        super().__init__(f'{step}: {msg}')


class TransportError(SynchronizationError):
    def __init__(self, step, error):
        self.error = error
        super().__init__(step, f'transport error: {error}')


class UpdateFailedError(SynchronizationError):
    def __init__(self, step, status_code, body=None):
        self.status_code = status_code
        self.body = body
        super().__init__(step, f'update rejected with status {status_code}')


class FetchFailedError(SynchronizationError):
    def __init__(self, step, status_code, body=None):
        self.status_code = status_code
        self.body = body
        super().__init__(step, f'fetch rejected with status {status_code}')
