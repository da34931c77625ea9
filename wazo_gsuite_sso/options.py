# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

from .exceptions import MissingDependencyError, OptionAlreadyProvided, TypeMismatchError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PluginOptions(Mapping):
    """Options shared by the plugins taking part in one assembly

    Values are looked up by key and type-checked at lookup. A key can only be
    set once, whether it was given at creation or provided by a plugin.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values: dict[str, Any] = dict(values or {})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_typed(self, key: str, expected_type: type[T]) -> T:
        try:
            value = self._values[key]
        except KeyError:
            raise MissingDependencyError(key)

        if not isinstance(value, expected_type):
            raise TypeMismatchError(key, expected_type, value)

        return value

    def set(self, key: str, value: Any) -> None:
        if key in self._values:
            raise OptionAlreadyProvided(key)

        logger.debug('providing option "%s"', key)
        self._values[key] = value

    def missing(self, keys) -> list[str]:
        return [key for key in keys if key not in self._values]
