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

from amqp1.actions import install
from amqp1.actions import start
from amqp1.actions import status
from amqp1.actions import uninstall


_NAMES_TO_RUNNER = {
    'install': install.InstallAction,
    'start': start.StartAction,
    'status': status.StatusAction,
    'stop': start.StopAction,
    'uninstall': uninstall.UninstallAction,
}
_RUNNER_TO_NAMES = dict((v, k) for k, v in _NAMES_TO_RUNNER.items())

# What devstack calls the plugin with => action to run (none means
# there is nothing to do at that point).
_HOOKS_TO_NAMES = {
    ('stack', 'pre-install'): None,
    ('stack', 'install'): 'install',
    ('stack', 'post-config'): 'start',
    ('stack', 'extra'): None,
    ('unstack', None): None,
    ('clean', None): 'uninstall',
}

# Devstack modes that are not split into phases
_PHASELESS_MODES = ['unstack', 'clean']


def names():
    """Returns a list of the available action names."""
    return list(sorted(_NAMES_TO_RUNNER.keys()))


def class_for(action):
    """Given an action name, look up the factory for that action runner."""
    try:
        return _NAMES_TO_RUNNER[action]
    except KeyError:
        raise RuntimeError('Unrecognized action %s' % action)


def name_for(runner_cls):
    return _RUNNER_TO_NAMES[runner_cls]


def for_hook(mode, phase=None):
    """Given a devstack plugin mode (and phase) returns the action name to
    run (or none when the plugin has nothing to do then).
    """
    mode = mode.strip().lower()
    if mode in _PHASELESS_MODES:
        phase = None
    elif phase is not None:
        phase = phase.strip().lower()
    return _HOOKS_TO_NAMES.get((mode, phase))
