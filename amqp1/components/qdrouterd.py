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

import re

from amqp1 import colorizer
from amqp1 import exceptions as excp
from amqp1 import log as logging
from amqp1 import shell as sh
from amqp1 import utils

from amqp1.components import base_install as binstall
from amqp1.components import base_runtime as bruntime
from amqp1.components import base_uninstall as buninstall

from amqp1.components.helpers import sasl

LOG = logging.getLogger(__name__)

CONF_FILE = '/etc/qpid-dispatch/qdrouterd.conf'

SASL_CONF_NAME = 'qdrouterd'
SASL_DB = '/var/lib/qdrouterd/qdrouterd.sasldb'

SBIN_DIRS = ['/usr/sbin', '/sbin']

# The listener address field was renamed from 'addr' to 'host' in 1.0
OLD_VERSION_MATCHER = re.compile(r"^0\.[^.]*\.")

# Fixed address prefixes and how messages sent to them are routed
ADDRESSES = [
    ('unicast', 'closest'),
    ('exclusive', 'closest'),
    ('broadcast', 'multicast'),
    ('openstack.org/om/rpc/multicast', 'multicast'),
    ('openstack.org/om/rpc/unicast', 'closest'),
    ('openstack.org/om/rpc/anycast', 'balanced'),
    ('openstack.org/om/notify/multicast', 'multicast'),
    ('openstack.org/om/notify/unicast', 'closest'),
    ('openstack.org/om/notify/anycast', 'balanced'),
]

PW_PROMPT = "ENTER A PASSWORD FOR QPID DISPATCH USER %s"


def listener_field(version):
    if OLD_VERSION_MATCHER.match(version.strip()):
        return 'addr'
    return 'host'


class QdrouterdInstaller(binstall.PkgInstallComponent):
    """Installs and configures the qpid dispatch router (rpc only)."""

    def warm_configs(self):
        # Ask for any missing password before anything gets installed
        self.get_credentials(PW_PROMPT)

    @property
    def log_file(self):
        return sh.joinpths(self.settings.log_dir, 'qdrouterd.log')

    def _get_version(self):
        qdrouterd = sh.which(self.daemon, additional_dirs=SBIN_DIRS)
        (stdout, _stderr) = sh.execute([qdrouterd, '-v'])
        return stdout.strip()

    def _config_params(self, username):
        version = self._get_version()
        LOG.debug("Found %s version %r", self.daemon, version)
        return {
            'ADDRESSES': ADDRESSES,
            'AUTHENTICATE_PEER': 'yes' if username else 'no',
            'LISTENER_FIELD': listener_field(version),
            'LOG_FILE': self.log_file,
            'PORT': self.transport_url.port,
            'ROUTER_ID': self.get_option('router_id', default_value='Router.A'),
            'SASL_CONF_DIR': sasl.SASL_CONF_DIR,
            'SASL_CONF_NAME': SASL_CONF_NAME,
            'WORKER_THREADS': self.get_int_option('worker_threads', default_value=4),
        }

    def configure(self):
        if not sh.isfile(CONF_FILE):
            raise excp.DistroNotSupported("qdrouterd.conf file not found!")
        sh.chmod(CONF_FILE, 'o+r', run_as_root=True)
        (username, password) = self.get_credentials(PW_PROMPT)
        params = self._config_params(username)
        configs = [
            (CONF_FILE, utils.render_template('qdrouterd', 'qdrouterd.conf', params)),
        ]
        if username:
            configs.append((sasl.conf_filename(SASL_CONF_NAME),
                            sasl.render_conf(SASL_DB)))
        amount = self._write_configs(configs)
        if username:
            sasl.add_user(self.distro, SASL_DB, username, password)
        else:
            LOG.info("No username given, %s will not authenticate peers.",
                     colorizer.quote(self.name))
        self._prepare_log_file(self.log_file)
        return amount


class QdrouterdRuntime(bruntime.ServiceRuntime):
    pass


class QdrouterdUninstaller(buninstall.PkgUninstallComponent):
    @property
    def state_files(self):
        return [sasl.conf_filename(SASL_CONF_NAME), SASL_DB]
