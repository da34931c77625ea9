# Copyright 2025 The Wazo Authors  (see the AUTHORS file)
# SPDX-License-Identifier: GPL-3.0-or-later

from setuptools import find_packages
from setuptools import setup

setup(
    name='wazo_gsuite_sso',
    version='1.0',
    description='Wazo G Suite single sign-on bridge',
    author='Wazo Authors',
    author_email='dev@wazo.community',
    url='http://wazo.community',
    packages=find_packages(include=['wazo_gsuite_sso', 'wazo_gsuite_sso.*']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.9',
    install_requires=[
        'cryptography',
        'jinja2',
        'oauthlib',
        'pysaml2',
        'pyyaml',
        'requests',
        'requests-oauthlib',
        'stevedore',
        'xivo @ https://github.com/wazo-platform/xivo-lib-python/archive/master.zip',
    ],
    extras_require={
        'test': [
            'pyhamcrest',
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wazo-gsuite-sso-sync = wazo_gsuite_sso.main:main',
        ],
        'wazo_gsuite_sso.plugins': [
            'gsuite_sso = wazo_gsuite_sso.plugin:Plugin',
        ],
        'wazo_gsuite_sso.mail_address_finders': [
            'session_login = wazo_gsuite_sso.mail_address:SessionLoginFinder',
        ],
    },
)
