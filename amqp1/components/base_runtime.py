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

from amqp1.components import base

LOG = logging.getLogger(__name__)


####
#### STATUS CONSTANTS
####
STATUS_STARTED = "started"
STATUS_STOPPED = "stopped"
STATUS_UNKNOWN = "unknown"


class ProgramStatus(object):
    def __init__(self, status, name=None, details=''):
        self.name = name
        self.status = status
        self.details = details

    def __str__(self):
        return "%s: %s" % (self.name, self.status)


class ServiceRuntime(base.Component):
    @property
    def applications(self):
        return [self.daemon]

    def get_command(self, command, program):
        cmd_template = self.distro.get_command("service", command)
        return utils.expand_template_deep(cmd_template, {'NAME': program})

    def _run(self, command, program):
        try:
            sh.execute(self.get_command(command, program), run_as_root=True)
        except excp.ProcessExecutionError:
            LOG.error("Failed to %s program %s under component %s.",
                      command, colorizer.quote(program), self.name)
            return False
        return True

    def _apply(self, command):
        amount = 0
        failed_programs = set()
        for program in self.applications:
            LOG.info("Applying %s to program %s under component %s.",
                     command, colorizer.quote(program), self.name)
            if self._run(command, program):
                amount += 1
            else:
                failed_programs.add(program)
        if failed_programs:
            raise excp.StatusException('Failed to %s %s for component %s'
                                       % (command, ', '.join(sorted(failed_programs)),
                                          self.name))
        return amount

    def stop(self):
        return self._apply('stop')

    def restart(self):
        # The daemon may already be running (with an older configuration).
        return self._apply('restart')

    def status_app(self, program):
        status_cmd = self.get_command("status", program)
        try:
            sh.execute(status_cmd)
        except excp.ProcessExecutionError:
            return False
        return True

    def _get_details(self, program, status):
        log_fn = sh.joinpths(self.settings.log_dir, "%s.log" % (program))
        if sh.isfile(log_fn):
            return "logging to %s" % (log_fn)
        return None

    def statii(self):
        statii = []
        for program in self.applications:
            status = (STATUS_STARTED
                      if self.status_app(program)
                      else STATUS_STOPPED)
            details = self._get_details(program, status)
            statii.append(ProgramStatus(name=program,
                                        status=status,
                                        details=details))
        return statii
