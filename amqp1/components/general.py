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

LOG = logging.getLogger(__name__)


class GeneralInstaller(binstall.PkgInstallComponent):
    """Distribution prerequisites shared by all the backends."""

    @property
    def repositories(self):
        return list(self.get_option('repositories', default_value=[]) or [])

    def pre_install(self):
        repos = self.repositories
        if not repos:
            return
        utils.log_iterable(repos, logger=LOG,
                           header="Adding %s package repositories" % (len(repos)))
        for repo in repos:
            self.packager.add_repository(repo)
        # Make the newly added repositories packages visible
        self.packager.refresh()
