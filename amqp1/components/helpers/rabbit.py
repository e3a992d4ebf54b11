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
from amqp1 import settings as amqp1_settings
from amqp1 import shell as sh
from amqp1 import transport_url as turl
from amqp1 import utils

LOG = logging.getLogger(__name__)


def notification_url(settings, virtual_host):
    """The url of the (devstack deployed) rabbit notification bus."""
    url = turl.make_transport_url(settings.rabbit_host,
                                  amqp1_settings.RABBIT_PORT,
                                  username=settings.rabbit_userid,
                                  password=settings.rabbit_password,
                                  transport='rabbit')
    return turl.join_virtual_host(url, virtual_host)


def add_vhost(distro, settings, virtual_host):
    LOG.info("Adding rabbit-mq virtual host %s.", colorizer.quote(virtual_host))
    params = {
        'VHOST': virtual_host,
        'USER': settings.rabbit_userid,
    }
    for what in ['add_vhost', 'set_permissions']:
        cmd = utils.expand_template_deep(distro.get_command('rabbit-mq', what), params)
        sh.execute(cmd, run_as_root=True)
