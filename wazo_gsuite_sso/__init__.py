# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from wazo_gsuite_sso.interfaces import AdminApp, MailAddressFinder, SAMLEngine

__all__ = [
    'AdminApp',
    'MailAddressFinder',
    'SAMLEngine',
]
