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
from amqp1 import log as logging
from amqp1 import shell as sh
from amqp1 import utils

from amqp1.components import base

LOG = logging.getLogger(__name__)


class PkgInstallComponent(base.Component):
    def __init__(self, *args, **kargs):
        super(PkgInstallComponent, self).__init__(*args, **kargs)
        self._packager = None

    @property
    def packager(self):
        if self._packager is None:
            self._packager = self.distro.package_manager_class(self.distro)
        return self._packager

    @property
    def packages(self):
        pkg_list = self.get_option('packages', default_value=[])
        if not pkg_list:
            pkg_list = []
        return list(pkg_list)

    def pre_install(self):
        pass

    def install(self):
        pkgs = self.packages
        utils.log_iterable([p['name'] for p in pkgs], logger=LOG,
                           header="Installing %s distribution packages" % (len(pkgs)))
        installed = []
        for p in pkgs:
            if self.packager.install(p):
                installed.append(p['name'])
        return len(installed)

    def configure(self):
        return 0

    def post_install(self):
        pass

    def _write_configs(self, configs):
        """Writes (root owned) configuration files from a list of
        (target filename, contents) tuples.
        """
        utils.log_iterable([fn for (fn, _contents) in configs], logger=LOG,
                           header="Configuring %s files" % (len(configs)))
        for (fn, contents) in configs:
            sh.write_file(fn, contents, run_as_root=True)
        return len(configs)

    def _prepare_log_file(self, log_fn):
        LOG.info("Logging %s output to %s.", colorizer.quote(self.name), log_fn)
        sh.mkdir(sh.dirname(log_fn), run_as_root=True)
        sh.touch_file(log_fn, run_as_root=True)
        # The daemon runs as its own user and must be able to write to it
        sh.chmod(log_fn, 'a+rw', run_as_root=True)
        return log_fn
