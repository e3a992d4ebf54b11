# vim: tabstop=4 shiftwidth=4 softtabstop=4

#    Copyright (C) 2012 Yahoo! Inc. All Rights Reserved.
#    Copyright (C) 2012 New Dream Network, LLC (DreamHost) All Rights Reserved.
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

import collections
import copy
import glob
import os
import platform
import re
import shlex

from amqp1 import exceptions as excp
from amqp1 import importer
from amqp1 import log as logging
from amqp1 import shell as sh
from amqp1 import utils

LOG = logging.getLogger(__name__)

Component = collections.namedtuple(  # pylint: disable=C0103
    "Component", 'entry_point,options,siblings')


class Distro(object):
    def __init__(self, name, platform_pattern,
                 package_manager, commands, components):
        self.name = name
        self._platform_pattern = re.compile(platform_pattern, re.IGNORECASE)
        self._package_manager = package_manager
        self._commands = commands
        self._components = components

    def _fetch_value(self, root, keys, quiet):
        end_key = keys[-1]
        for k in keys[0:-1]:
            if quiet:
                root = root.get(k)
                if root is None:
                    return None
            else:
                root = root[k]
        end_value = None
        if not quiet:
            end_value = root[end_key]
        else:
            end_value = root.get(end_key)
        return end_value

    def get_command_config(self, key, *more_keys, **kwargs):
        root = dict(self._commands)
        keys = [key] + list(more_keys)
        return self._fetch_value(root, keys, kwargs.get('quiet', False))

    def get_command(self, key, *more_keys, **kwargs):
        """Retrieves a string for running a command from the setup
        and splits it to return a list.
        """
        val = self.get_command_config(key, *more_keys, **kwargs)
        if not val:
            return []
        else:
            return shlex.split(val)

    def supports_platform(self, platform_name):
        """Does this distro support the named platform?

        :param platform_name: Return value from :func:`platform_name`.
        """
        return bool(self._platform_pattern.search(platform_name))

    @property
    def package_manager_class(self):
        """Return a package manager that will work for this distro."""
        return importer.import_entry_point(self._package_manager)

    def extract_component(self, name, action):
        """Return the class + component info to use for doing the action w/the component.

        Returns none if the component does not take part in the action.
        """
        try:
            # Use a copy instead of the original since we will be
            # modifying this dictionary which may not be wanted for future
            # usages of this dictionary (so keep the original clean)...
            component_info = copy.deepcopy(self._components[name])
        except KeyError:
            raise excp.ConfigException('Component %r is not known to distribution %r'
                                       % (name, self.name))
        action_classes = component_info.pop('action_classes', {})
        try:
            entry_point = action_classes.pop(action)
        except KeyError:
            return None
        else:
            return Component(entry_point, component_info, action_classes)

    def __str__(self):
        return self.name


def platform_name():
    """Identifies the running platform (ie 'ubuntu debian')."""
    try:
        info = platform.freedesktop_os_release()
    except OSError:
        return platform.platform()
    pieces = [info.get('ID', ''), info.get('ID_LIKE', '')]
    return " ".join(p for p in pieces if p).strip()


def _match_distros(distros, plt):
    for d in distros:
        if d.supports_platform(plt):
            return d
    raise excp.DistroNotSupported("amqp1 qpid installation (platform %r)" % (plt))


def load(path, plt=None):
    distro_possibles = []
    input_files = sorted(glob.glob(sh.joinpths(path, '*.yaml')))
    if not input_files:
        raise excp.ConfigException('Did not find any distro definition files in %r' % path)
    for fn in input_files:
        LOG.debug("Attempting to load distro definition from %r", fn)
        try:
            cls_kvs = utils.load_yaml(fn)
        except Exception as err:
            LOG.warning('Could not load distro definition from %r: %s', fn, err)
        else:
            if 'name' not in cls_kvs:
                name, _ext = os.path.splitext(sh.basename(fn))
                cls_kvs['name'] = name
            distro_possibles.append(Distro(**cls_kvs))
    if plt is None:
        plt = platform_name()
    return _match_distros(distro_possibles, plt)
