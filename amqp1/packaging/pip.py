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

from amqp1 import log as logging
from amqp1 import packager as pack
from amqp1 import shell as sh

LOG = logging.getLogger(__name__)

PIP_INSTALL_CMD_OPTS = ['-q']
CONSTRAINTS_FILE = 'upper-constraints.txt'


class Packager(pack.Packager):
    """Installs python packages, constrained by openstack/requirements."""

    command_section = 'pip'

    def __init__(self, distro, remove_default=False, params=None,
                 requirements_dir=None):
        super(Packager, self).__init__(distro, remove_default=remove_default,
                                       params=params)
        self.requirements_dir = requirements_dir

    @property
    def constraints_file(self):
        if not self.requirements_dir:
            return None
        path = sh.joinpths(self.requirements_dir, CONSTRAINTS_FILE)
        if not sh.isfile(path):
            return None
        return path

    def _install(self, pip):
        cmd = self._get_command('install') + PIP_INSTALL_CMD_OPTS
        constraints = self.constraints_file
        if constraints:
            LOG.debug("Constraining %s with %s", pip['name'], constraints)
            cmd.extend(['-c', constraints])
        name = pip['name']
        if pip.get('version'):
            name = "%s%s" % (name, pip['version'])
        self._execute(cmd + [name])
