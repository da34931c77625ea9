# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
from functools import partial

from stevedore.named import NamedExtensionManager
from xivo.plugin_helpers import on_load_failure, on_missing_entrypoints

from .exceptions import MissingDependencyError
from .options import PluginOptions

logger = logging.getLogger(__name__)

NAMESPACE = 'wazo_gsuite_sso.plugins'


def assemble(plugin, options: PluginOptions) -> None:
    missing = options.missing(plugin.required_options())
    if missing:
        logger.error('cannot assemble %s: missing options %s', plugin, missing)
        raise MissingDependencyError(missing[0])

    plugin.provide_options(options)

    for key in plugin.provided_options():
        if options.get(key) is None:
            raise MissingDependencyError(key)


def load_plugins(
    options: PluginOptions, enabled: dict[str, bool], config: dict
) -> NamedExtensionManager | None:
    names = [name for name, value in enabled.items() if value is True]
    logger.debug('Enabled plugins for namespace "%s": %s', NAMESPACE, names)
    if not names:
        logger.info('no enabled plugins for namespace "%s"', NAMESPACE)
        return None

    manager = NamedExtensionManager(
        NAMESPACE,
        names,
        name_order=True,
        on_load_failure_callback=on_load_failure,
        on_missing_entrypoints_callback=partial(on_missing_entrypoints, NAMESPACE),
        invoke_on_load=True,
        invoke_args=(config,),
    )

    for extension in manager.extensions:
        logger.debug('assembling plugin %s', extension.name)
        assemble(extension.obj, options)

    return manager
