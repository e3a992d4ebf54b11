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
from amqp1 import packager as pack

LOG = logging.getLogger(__name__)


class YumPackager(pack.Packager):

    def add_repository(self, repo):
        # Repositories (ie epel) are expected to be set up already unless
        # they are given as a repo file url.
        if "://" not in repo:
            LOG.warn("Skipping package repository %s; only repository urls"
                     " can be added on %s.", repo, self.distro)
            return
        super(YumPackager, self).add_repository(repo)
