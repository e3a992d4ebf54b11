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

from amqp1 import exceptions as excp
from amqp1 import log as logging
from amqp1 import packager as pack

LOG = logging.getLogger(__name__)

# Make sure its non-interactive
# http://awaseconfigurations.wordpress.com/tag/debian_frontend/
ENV_ADDITIONS = {'DEBIAN_FRONTEND': 'noninteractive'}

# What dpkg says about a package that is really there (and not just
# leftover configuration files of a removed package).
INSTALLED_STATUS = 'install ok installed'


class AptPackager(pack.Packager):

    def _execute(self, cmd, **kwargs):
        kwargs.setdefault('env_overrides', ENV_ADDITIONS)
        return super(AptPackager, self)._execute(cmd, **kwargs)

    def _anything_there(self, pkg):
        cmd = self._get_command('query', NAME=pkg['name'])
        try:
            (stdout, _stderr) = self._execute(cmd, run_as_root=False)
        except excp.ProcessExecutionError:
            return None
        for line in stdout.splitlines():
            if line.startswith("Status:") and INSTALLED_STATUS in line:
                return pkg['name']
        return None
