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


class UninstallAction(action.Action):
    @property
    def lookup_name(self):
        return 'uninstall'

    def _order_components(self, components):
        components = super(UninstallAction, self)._order_components(components)
        components.reverse()
        return components

    def _run(self, instances):
        self._run_phase(
            action.PhaseFunctors(
                start=None,
                run=lambda i: i.pre_uninstall(),
                end=None,
            ),
            instances,
            'pre-uninstall',
        )
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Uninstalling %s.', colorizer.quote(i.name)),
                run=lambda i: i.uninstall(),
                end=lambda i, result: LOG.info("Removed %s package(s) of %s.",
                                               result, colorizer.quote(i.name)),
            ),
            instances,
            'uninstall',
        )
        self._run_phase(
            action.PhaseFunctors(
                start=lambda i: LOG.info('Post-uninstalling %s.', colorizer.quote(i.name)),
                run=lambda i: i.post_uninstall(),
                end=None,
            ),
            instances,
            'post-uninstall',
        )
