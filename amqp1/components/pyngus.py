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
from amqp1 import utils

from amqp1.components import base_install as binstall
from amqp1.packaging import pip

LOG = logging.getLogger(__name__)


class PyngusInstaller(binstall.PkgInstallComponent):
    """The python AMQP 1.0 client library used by oslo.messaging."""

    def __init__(self, *args, **kargs):
        super(PyngusInstaller, self).__init__(*args, **kargs)
        self._pip_packager = None

    @property
    def pip_packager(self):
        if self._pip_packager is None:
            self._pip_packager = pip.Packager(self.distro,
                                              params={'PYTHON': self.settings.python},
                                              requirements_dir=self.settings.requirements_dir)
        return self._pip_packager

    @property
    def pips(self):
        return list(self.get_option('pips', default_value=[]) or [])

    def install(self):
        # The proton bindings must come from the distribution first
        installed = super(PyngusInstaller, self).install()
        pips = self.pips
        utils.log_iterable([p['name'] for p in pips], logger=LOG,
                           header="Installing %s python packages" % (len(pips)))
        for p in pips:
            if self.pip_packager.install(p):
                installed += 1
        return installed
