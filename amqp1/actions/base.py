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
import collections

from amqp1 import colorizer
from amqp1 import env
from amqp1 import importer
from amqp1 import log as logging
from amqp1 import utils

LOG = logging.getLogger(__name__)

# Always set up, whatever messaging backends are wanted
BASE_COMPONENTS = ['general', 'pyngus']


class PhaseFunctors(object):
    def __init__(self, start, run, end):
        self.start = start
        self.run = run
        self.end = end


class Action(object, metaclass=abc.ABCMeta):
    def __init__(self, name, distro, settings, passwords=None):
        self.distro = distro
        self.name = name
        # The (environment provided) plugin settings
        self.settings = settings
        # Shared by all components so that the keyring is only opened once
        self.passwords = passwords

    @property
    @abc.abstractmethod
    def lookup_name(self):
        # Name that will be used to lookup this module
        # in any configuration (may or may not be the same as the name
        # of this action)....
        raise NotImplementedError()

    @abc.abstractmethod
    def _run(self, instances):
        """Run the phases of processing for this action.

        Subclasses are expected to override this method to
        do something useful.
        """
        raise NotImplementedError()

    def _order_components(self, components):
        return list(components)

    @property
    def component_names(self):
        return self._order_components(BASE_COMPONENTS + self.settings.backends)

    def _construct_instances(self):
        """Create component objects for each wanted component."""
        instances = collections.OrderedDict()
        for c in self.component_names:
            d_component = self.distro.extract_component(c, self.lookup_name)
            if d_component is None:
                LOG.debug("Component %r does not take part in action %r.", c, self.lookup_name)
                continue
            LOG.debug("Constructing component %r (%s)", c, d_component.entry_point)
            instance_params = {
                'name': c,
                'options': d_component.options,
                'siblings': d_component.siblings,
                'distro': self.distro,
                'settings': self.settings,
                'instances': instances,
                'passwords': self.passwords,
            }
            instances[c] = importer.construct_entry_point(d_component.entry_point,
                                                          **instance_params)
        return instances

    def _verify_components(self, instances):
        for _c, instance in instances.items():
            instance.verify()

    def _warm_components(self, instances):
        for _c, instance in instances.items():
            instance.warm_configs()

    def _on_start(self, instances):
        LOG.info("Booting up your components.")
        LOG.debug("Starting environment settings:")
        for (k, v) in sorted(env.get().items()):
            if k.startswith('AMQP1_') and 'PASSWORD' not in k:
                LOG.debug(" %s => %s", k, v)
        self._verify_components(instances)
        self._warm_components(instances)

    def _on_finish(self, instances):
        LOG.info("Tearing down your components.")

    def _run_phase(self, functors, instances, phase_name):
        """Run a given 'functor' across all of the components, in order."""
        LOG.debug("Running phase %r over %s components.", phase_name, len(instances))
        results = {}
        for c, instance in instances.items():
            if functors.start:
                functors.start(instance)
            if functors.run:
                result = functors.run(instance)
            else:
                result = None
            if functors.end:
                functors.end(instance, result)
            results[c] = result
        return results

    def run(self):
        instances = self._construct_instances()
        LOG.info("Processing components for action %s (%s).",
                 colorizer.quote(self.name), self.settings)
        utils.log_iterable(list(instances.keys()),
                           header="Activating components in the following order",
                           logger=LOG)
        self._on_start(instances)
        self._run(instances)
        self._on_finish(instances)
        return instances
