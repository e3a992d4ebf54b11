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

import os

from amqp1 import settings
from amqp1 import shell as sh
from amqp1 import test

LICENSE_END = "#    under the License."


class TestLicenseHeaders(test.TestCase):

    def _sources(self):
        for (root, _dirs, files) in os.walk(settings.PKG_DIR):
            for fn in files:
                if fn.endswith(".py"):
                    yield sh.joinpths(root, fn)

    def test_headers_complete(self):
        for path in self._sources():
            lines = sh.load_file(path).splitlines()[0:25]
            self.assertIn(LICENSE_END, lines, "%s has no full license header" % path)
