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

LOG = log.getLogger(__name__)


class InstallAction(action.Action):
    @property
    def lookup_name(self):
        return 'install'

    def _run(self, instances):
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Preinstalling %s.', colorizer.quote(i.name)),
                run=lambda i: i.pre_install(),
                end=None,
            ),
            instances,
            "pre-install",
        )
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Installing %s.', colorizer.quote(i.name)),
                run=lambda i: i.install(),
                end=lambda i, result: LOG.info("Installed %s package(s) for %s.",
                                               result, colorizer.quote(i.name)),
            ),
            instances,
            "package-install",
        )
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Configuring %s.', colorizer.quote(i.name)),
                run=lambda i: i.configure(),
                end=None,
            ),
            instances,
            "configure",
        )
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Post-installing %s.', colorizer.quote(i.name)),
                run=lambda i: i.post_install(),
                end=None,
            ),
            instances,
            "post-install",
        )
