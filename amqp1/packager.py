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

import abc

from amqp1 import colorizer
from amqp1 import exceptions as excp
from amqp1 import log as logging
from amqp1 import shell as sh
from amqp1 import type_utils
from amqp1 import utils

LOG = logging.getLogger(__name__)


class Packager(object, metaclass=abc.ABCMeta):
    # Section of the distro commands this packager uses
    command_section = 'package'

    def __init__(self, distro, remove_default=False, params=None):
        self.distro = distro
        self.remove_default = remove_default
        self.params = dict(params or {})

    def _get_command(self, name, **params):
        cmd_template = self.distro.get_command(self.command_section, name, quiet=True)
        if not cmd_template:
            raise excp.PackageException("No %s %r command configured for distribution %s"
                                        % (self.command_section, name, self.distro))
        tpl_params = dict(self.params)
        tpl_params.update(params)
        return utils.expand_template_deep(cmd_template, tpl_params)

    def _execute(self, cmd, **kwargs):
        kwargs.setdefault('run_as_root', True)
        return sh.execute(cmd, **kwargs)

    def _anything_there(self, pkg):
        cmd = self._get_command('query', NAME=pkg['name'])
        try:
            self._execute(cmd, run_as_root=False)
        except excp.ProcessExecutionError:
            return None
        return pkg['name']

    def install(self, pkg):
        installed_already = self._anything_there(pkg)
        if not installed_already:
            LOG.info("Installing %s.", colorizer.quote(pkg['name']))
            self._install(pkg)
            return True
        else:
            LOG.debug("Skipping install of %r since %s is already there.", pkg['name'], installed_already)
            return False

    def remove(self, pkg):
        should_remove = self.remove_default
        if 'removable' in pkg:
            should_remove = type_utils.make_bool(pkg['removable'])
        if not should_remove:
            return False
        if not self._anything_there(pkg):
            LOG.debug("Skipping removal of %r since it is not installed.", pkg['name'])
            return False
        LOG.info("Removing %s.", colorizer.quote(pkg['name']))
        self._remove(pkg)
        return True

    def add_repository(self, repo):
        LOG.info("Adding package repository %s.", colorizer.quote(repo))
        self._execute(self._get_command('add_repository', REPO=repo))

    def refresh(self):
        LOG.info("Refreshing package repositories.")
        self._execute(self._get_command('refresh'))

    def _install(self, pkg):
        self._execute(self._get_command('install', NAME=pkg['name']))

    def _remove(self, pkg):
        self._execute(self._get_command('remove', NAME=pkg['name']))
