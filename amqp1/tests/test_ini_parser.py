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

import io
import shutil
import tempfile

from amqp1 import ini_parser
from amqp1 import shell as sh
from amqp1 import test


class TestRewritableConfigParser(test.TestCase):

    def setUp(self):
        super(TestRewritableConfigParser, self).setUp()
        self.config_parser = ini_parser.RewritableConfigParser()

    def _read_ini(self, ini):
        self.config_parser.readfp(io.StringIO(ini))

    def test_commented_option_regexp_simple(self):
        regexp = self.config_parser.option_regex
        result = regexp.match("# transport_url = rabbit://")
        self.assertIsNotNone(result)
        self.assertEqual(result.group(1), "transport_url")

    def test_commented_option_regexp_no_spaces(self):
        regexp = self.config_parser.option_regex
        result = regexp.match("#transport_url=amqp://")
        self.assertIsNotNone(result)
        self.assertEqual(result.group(1), "transport_url")

    def test_comment_is_not_an_option(self):
        regexp = self.config_parser.option_regex
        self.assertIsNone(regexp.match("# just a comment"))

    def test_readfp_comments_one_section(self):
        self._read_ini("""
[oslo_messaging_amqp]
# comment line #1
# idle_timeout = 0

# comment line #2
# trace = false
""")

        # 3 global scope elements
        global_elements = self.config_parser.data._data.contents
        self.assertEqual(len(global_elements), 3)

        # 6 lines in the section
        section = global_elements[1]
        self.assertEqual(len(section.contents), 6)

    def test_set_after_commented_option(self):
        self._read_ini("""[oslo_messaging_notifications]
# The driver(s) to handle sending notifications.
#driver =

# A URL representing the messaging driver to use for notifications.
#transport_url = <None>

# AMQP topic used for OpenStack notifications.
#topics = notifications
""")
        self.config_parser.set('oslo_messaging_notifications', 'transport_url',
                               'amqp://localhost:5672/')
        lines = self.config_parser.stringify().splitlines()
        idx = lines.index("#transport_url = <None>")
        self.assertEqual("transport_url = amqp://localhost:5672/", lines[idx + 1])
        self.assertIn("#topics = notifications", lines)

    def test_set_new_section(self):
        self._read_ini("[DEFAULT]\ndebug = True\n")
        self.config_parser.set('oslo_messaging_notifications', 'transport_url', 'x')
        self.assertEqual('x', self.config_parser.get('oslo_messaging_notifications',
                                                     'transport_url'))
        self.assertIn('debug = True', self.config_parser.stringify())

    def test_get_missing(self):
        self.assertIsNone(self.config_parser.get('nothere', 'transport_url'))


class TestIniset(test.TestCase):

    def setUp(self):
        super(TestIniset, self).setUp()
        self.tmp_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp_dir, True)
        self.path = sh.joinpths(self.tmp_dir, 'nova.conf')

    def test_iniset_existing_file(self):
        sh.write_file(self.path, "# Nova config\n"
                                 "[DEFAULT]\n"
                                 "# Should be kept\n"
                                 "debug = True\n"
                                 "transport_url = rabbit://old\n")
        ini_parser.iniset(self.path, 'DEFAULT', 'transport_url', 'amqp://new:5672/')
        contents = sh.load_file(self.path)
        self.assertIn("# Nova config", contents)
        self.assertIn("# Should be kept", contents)
        self.assertIn("transport_url = amqp://new:5672/", contents)
        self.assertNotIn("rabbit://old", contents)
        self.assertIn("debug = True", contents)

    def test_iniset_new_file(self):
        ini_parser.iniset(self.path, 'oslo_messaging_notifications',
                          'transport_url', 'amqp://localhost:5672/')
        cfg = ini_parser.RewritableConfigParser(fns=[self.path])
        self.assertEqual('amqp://localhost:5672/',
                         cfg.get('oslo_messaging_notifications', 'transport_url'))
