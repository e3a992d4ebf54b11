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
from amqp1 import log

from amqp1.actions import base as action

from amqp1.components.base_runtime import STATUS_STARTED
from amqp1.components.base_runtime import STATUS_STOPPED
from amqp1.components.base_runtime import STATUS_UNKNOWN

LOG = log.getLogger(__name__)

STATUS_COLOR_MAP = {
    STATUS_STARTED: 'green',
    STATUS_UNKNOWN: 'yellow',
    STATUS_STOPPED: 'red',
}


class StatusAction(action.Action):
    def __init__(self, name, distro, settings, passwords=None):
        super(StatusAction, self).__init__(name, distro, settings, passwords=passwords)
        self.statuses = {}

    @property
    def lookup_name(self):
        return 'running'

    def _quote_status(self, status):
        return colorizer.quote(status, quote_color=STATUS_COLOR_MAP.get(status, 'red'))

    def _print_status(self, component, result):
        if not result:
            LOG.info("Status of %s is %s.", colorizer.quote(component.name),
                     self._quote_status(STATUS_UNKNOWN))
            return
        for s in result:
            if s.name and s.name != component.name:
                LOG.info("Status of %s (%s) is %s.", colorizer.quote(component.name),
                         s.name, self._quote_status(s.status))
            else:
                LOG.info("Status of %s is %s.", colorizer.quote(component.name),
                         self._quote_status(s.status))
            if s.details:
                LOG.info("  >> %s", s.details)

    def _run(self, instances):
        self.statuses = self._run_phase(
            action.PhaseFunctors(
                start=None,
                run=lambda i: i.statii(),
                end=self._print_status,
            ),
            instances,
            "status",
        )

    def all_started(self):
        for (_name, statii) in self.statuses.items():
            for s in statii:
                if s.status != STATUS_STARTED:
                    return False
        return True
