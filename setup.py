#!/usr/bin/env python

#    Copyright (C) 2014 Yahoo! Inc. All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import setuptools

from amqp1 import version


def read_requires(filename):
    requires = []
    with open(filename, "r") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            requires.append(line)
    return requires


with open("README.rst", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='devstack-plugin-amqp1',
    description='Sets up AMQP 1.0 messaging backends (qpidd, qdrouterd) for devstack',
    author='OpenStack Foundation',
    author_email='openstack-discuss@lists.openstack.org',
    url='https://opendev.org/openstack/devstack-plugin-amqp1',
    long_description=long_description,
    packages=setuptools.find_packages(),
    package_data={
        'amqp1': [
            'conf/distros/*.yaml',
            'conf/templates/*/*',
        ],
    },
    license='Apache Software License',
    version=version.version_string(),
    python_requires='>=3.10',
    entry_points={
        'console_scripts': [
            'amqp1 = amqp1.__main__:main',
        ],
    },
    install_requires=read_requires("requirements.txt"),
    tests_require=read_requires("test-requirements.txt"),
    extras_require={
        'test': read_requires("test-requirements.txt"),
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Environment :: OpenStack',
        'Intended Audience :: Information Technology',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
)
