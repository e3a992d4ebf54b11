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

# Where the distributions put the broker configuration (in search order)
CONF_LOCATIONS = [
    '/etc/qpid/qpidd.conf',
    '/etc/qpidd.conf',
]
ACL_FILE = '/etc/qpid/qpidd.acl'

SASL_CONF_NAME = 'qpidd'
SASL_DB = '/var/lib/qpidd/qpidd.sasldb'
SASL_REALM = 'QPID'
SASL_SERVICE_NAME = 'amqp'

# Daemons are not always on a normal users path
SBIN_DIRS = ['/usr/sbin', '/sbin']

PW_PROMPT = "ENTER A PASSWORD FOR QPID USER %s"


def find_conf():
    for fn in CONF_LOCATIONS:
        if sh.isfile(fn):
            return fn
    raise excp.DistroNotSupported("qpidd.conf file not found!")


class QpiddInstaller(binstall.PkgInstallComponent):
    """Installs and configures the qpid C++ broker (notifications and rpc)."""

    def warm_configs(self):
        # Ask for any missing password before anything gets installed
        self.get_credentials(PW_PROMPT)

    @property
    def log_file(self):
        return sh.joinpths(self.settings.log_dir, 'qpidd.log')

    def _get_help(self):
        qpidd = sh.which(self.daemon, additional_dirs=SBIN_DIRS)
        (stdout, _stderr) = sh.execute([qpidd, '--help'])
        return stdout

    def _ensure_acl_file(self):
        if not sh.isfile(ACL_FILE):
            sh.mkdir(sh.dirname(ACL_FILE), mode=0o755, run_as_root=True)
            sh.touch_file(ACL_FILE, run_as_root=True)
        sh.chmod(ACL_FILE, 'o+r', run_as_root=True)

    def _config_params(self, username, help_text):
        params = {
            'ACL_FILE': ACL_FILE,
            'AUTH': 'yes' if username else 'no',
            'LOG_FILE': self.log_file,
            'REALM': SASL_REALM,
            'SASL_SERVICE_NAME': None,
            'USERNAME': username,
        }
        if utils.has_any(help_text, 'sasl-service-name'):
            params['SASL_SERVICE_NAME'] = SASL_SERVICE_NAME
        return params

    def configure(self):
        conf_fn = find_conf()
        # The broker does not run as root and has to be able to read these
        sh.chmod(conf_fn, 'o+r', run_as_root=True)
        self._ensure_acl_file()
        help_text = self._get_help()
        if not utils.has_any(help_text, 'queue-patterns'):
            raise excp.DistroNotSupported("qpidd with AMQP 1.0 support")
        (username, password) = self.get_credentials(PW_PROMPT)
        params = self._config_params(username, help_text)
        configs = [
            (conf_fn, utils.render_template('qpidd', 'qpidd.conf', params)),
            (ACL_FILE, utils.render_template('qpidd', 'qpidd.acl', params)),
        ]
        if username:
            configs.append((sasl.conf_filename(SASL_CONF_NAME),
                            sasl.render_conf(SASL_DB)))
        amount = self._write_configs(configs)
        if username:
            sasl.add_user(self.distro, SASL_DB, username, password,
                          realm=SASL_REALM)
        else:
            LOG.info("No username given, %s will accept unauthenticated connections.",
                     colorizer.quote(self.name))
        self._prepare_log_file(self.log_file)
        return amount


class QpiddRuntime(bruntime.ServiceRuntime):
    pass


class QpiddUninstaller(buninstall.PkgUninstallComponent):
    @property
    def state_files(self):
        return [sasl.conf_filename(SASL_CONF_NAME), SASL_DB]
