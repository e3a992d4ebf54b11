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
from amqp1 import shell as sh
from amqp1 import utils

from amqp1.components import base

LOG = logging.getLogger(__name__)


class PkgUninstallComponent(base.Component):
    def __init__(self, *args, **kargs):
        super(PkgUninstallComponent, self).__init__(*args, **kargs)
        self._packager = None

    @property
    def packager(self):
        if self._packager is None:
            self._packager = self.distro.package_manager_class(self.distro,
                                                               remove_default=True)
        return self._packager

    @property
    def packages(self):
        return list(self.get_option('packages', default_value=[]) or [])

    @property
    def state_files(self):
        # Files holding state (ie credentials) this component created
        return []

    def pre_uninstall(self):
        pass

    def uninstall(self):
        pkgs = self.packages
        utils.log_iterable([p['name'] for p in pkgs], logger=LOG,
                           header="Potentially removing %s distribution packages" % (len(pkgs)))
        which_removed = []
        for p in pkgs:
            if self.packager.remove(p):
                which_removed.append(p['name'])
        utils.log_iterable(which_removed, logger=LOG,
                           header="Actually removed %s distribution packages" % (len(which_removed)))
        return len(which_removed)

    def post_uninstall(self):
        # Not checked for existence; they may only be visible to root
        files = self.state_files
        utils.log_iterable(files, logger=LOG,
                           header="Removing %s state files" % (len(files)))
        for fn in files:
            sh.unlink(fn, run_as_root=True)
