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

LOG = logging.getLogger(__name__)

SASL_CONF_DIR = '/etc/sasl2'


def conf_filename(conf_name):
    return sh.joinpths(SASL_CONF_DIR, "%s.conf" % (conf_name))


def render_conf(db_path):
    return utils.render_template('sasl2', 'sasl2.conf', {'DB_PATH': db_path})


def add_user(distro, db_path, username, password, realm=None):
    """Adds (or replaces) a PLAIN user in a sasldb."""
    LOG.info("Adding user %s to sasl database %s.", colorizer.quote(username), db_path)
    db_dir = sh.dirname(db_path)
    if not sh.isdir(db_dir):
        sh.mkdir(db_dir, mode=0o755, run_as_root=True)
    params = {
        'DB': db_path,
        'USER': username,
        'REALM': realm,
    }
    if realm:
        cmd_template = distro.get_command('sasl', 'create_realm_user')
    else:
        cmd_template = distro.get_command('sasl', 'create_user')
    cmd = utils.expand_template_deep(cmd_template, params)
    sh.execute(cmd, process_input="%s\n" % (password), run_as_root=True)
    # The daemon (running as its own user) has to be able to read it.
    sh.chmod(db_path, 'o+r', run_as_root=True)
    return db_path
