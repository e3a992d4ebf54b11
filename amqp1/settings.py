# vim: tabstop=4 shiftwidth=4 softtabstop=4

#    Copyright (C) 2012 Yahoo! Inc. All Rights Reserved.
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

import os

from amqp1 import env
from amqp1 import exceptions as excp
from amqp1 import transport_url as turl

# Where the configs and templates should be at...
PKG_DIR = os.path.abspath(os.path.dirname(__file__))
CONFIG_DIR = os.path.join(PKG_DIR, "conf")
DISTRO_DIR = os.path.join(CONFIG_DIR, "distros")
TEMPLATE_DIR = os.path.join(CONFIG_DIR, "templates")

# Backend names
QPIDD = 'qpidd'
QDROUTERD = 'qdrouterd'
RABBIT = 'rabbit'
EXTERNAL = 'external'

# AMQP1_SERVICE => (rpc backend, notification backend)
SERVICE_BACKENDS = {
    # Use qpidd for both notifications and RPC messages
    'qpid': (QPIDD, QPIDD),
    # Use qpidd for notifications and qdrouterd for RPC messages
    'qpid-dual': (QDROUTERD, QPIDD),
    # Use rabbitmq for notifications and qdrouterd for RPC messages
    'qpid-hybrid': (QDROUTERD, RABBIT),
    # Use a pre-provisioned message bus @ the given transport urls
    'external': (EXTERNAL, EXTERNAL),
}
DEFAULT_SERVICE = 'qpid'

# The router listens elsewhere when it runs next to a broker so that the
# two do not fight over the standard amqp port.
BROKER_PORT = 5672
ROUTER_PORT = 45672
RABBIT_PORT = 5672

DEFAULT_LOG_DIR = '/opt/stack/logs'
DEFAULT_REQUIREMENTS_DIR = '/opt/stack/requirements'
DEFAULT_RABBIT_USERID = 'stackrabbit'


def resolve_backends(service):
    try:
        return SERVICE_BACKENDS[service]
    except KeyError:
        raise excp.ConfigException("Set AMQP1_SERVICE to one of: qpid, qpid-dual,"
                                   " qpid-hybrid or external - %s not supported"
                                   % (service))


class Settings(object):
    """The plugin configuration, as found in the (devstack) environment."""

    def __init__(self, environ=None):
        if environ is None:
            environ = env.get()
        self._environ = dict(environ)
        self.service = self._get('AMQP1_SERVICE', DEFAULT_SERVICE).strip()
        (self.rpc_backend, self.notify_backend) = resolve_backends(self.service)
        self.host = self._get_first('AMQP1_HOST', 'SERVICE_HOST', 'HOST_IP',
                                    default_value='localhost')
        self.username = self._get('AMQP1_USERNAME')
        self.password = self._get('AMQP1_PASSWORD', '')
        if self.service == 'qpid':
            default_port = BROKER_PORT
        else:
            default_port = ROUTER_PORT
        self.default_port = self._get_port('AMQP1_DEFAULT_PORT', default_port)
        self.notify_port = self._get_port('AMQP1_NOTIFY_PORT', BROKER_PORT)
        self.rpc_transport_url = self._get('AMQP1_RPC_TRANSPORT_URL')
        if not self.rpc_transport_url:
            self.rpc_transport_url = turl.make_transport_url(self.host, self.default_port,
                                                             username=self.username,
                                                             password=self.password)
        self.notify_transport_url = self._get('AMQP1_NOTIFY_TRANSPORT_URL')
        if not self.notify_transport_url:
            self.notify_transport_url = turl.make_transport_url(self.host, self.notify_port,
                                                                username=self.username,
                                                                password=self.password)
        self.log_dir = self._get('LOGDIR', DEFAULT_LOG_DIR)
        self.requirements_dir = self._get('REQUIREMENTS_DIR', DEFAULT_REQUIREMENTS_DIR)
        self.python = self._get('PYTHON', 'python3')
        self.rabbit_userid = self._get('RABBIT_USERID', DEFAULT_RABBIT_USERID)
        self.rabbit_password = self._get('RABBIT_PASSWORD', '')
        self.rabbit_host = self._get_first('RABBIT_HOST', 'SERVICE_HOST',
                                           default_value=self.host)
        self.keyring_path = self._get('AMQP1_KEYRING_FILE')

    def _get(self, key, default_value=None):
        # Unset and empty (shell) variables are treated the same.
        value = self._environ.get(key)
        if value is None or not str(value).strip():
            return default_value
        return value

    def _get_port(self, key, default_value):
        value = self._get(key, default_value)
        try:
            return int(value)
        except ValueError:
            raise excp.ConfigException("%s must be a port number, not %r" % (key, value))

    def _get_first(self, *keys, **kwargs):
        for k in keys:
            value = self._get(k)
            if value is not None:
                return value
        return kwargs.get('default_value')

    @property
    def backends(self):
        """Backends that this plugin deploys locally (in install order)."""
        wanted = []
        if self.rpc_backend == QDROUTERD:
            wanted.append(QDROUTERD)
        if self.notify_backend == QPIDD:
            wanted.append(QPIDD)
        return wanted

    def transport_url_for(self, backend):
        if backend == self.notify_backend:
            return self.notify_transport_url
        return self.rpc_transport_url

    def __str__(self):
        return "%s (rpc=%s, notify=%s)" % (self.service, self.rpc_backend,
                                           self.notify_backend)
