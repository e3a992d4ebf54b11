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

"""Replacements for the devstack ``lib/rpc_backend`` functions, so that
services get configured with the AMQP 1.0 messaging backend urls.
"""

from amqp1 import colorizer
from amqp1 import distro as amqp1_distro
from amqp1 import ini_parser
from amqp1 import log as logging
from amqp1 import settings as amqp1_settings
from amqp1 import transport_url as turl

from amqp1.components.helpers import rabbit

LOG = logging.getLogger(__name__)

DEFAULT_SECTION = 'DEFAULT'
NOTIFICATIONS_SECTION = 'oslo_messaging_notifications'
TRANSPORT_URL_OPTION = 'transport_url'


def get_transport_url(settings, virtual_host=None):
    """The (rpc) transport url services are configured with."""
    return turl.join_virtual_host(settings.rpc_transport_url, virtual_host)


def get_notification_url(settings, virtual_host=None):
    """The transport url services send notifications to."""
    if settings.notify_backend == amqp1_settings.RABBIT:
        return rabbit.notification_url(settings, virtual_host or '')
    return turl.join_virtual_host(settings.notify_transport_url, virtual_host)


def iniset_rpc_backend(settings, package, path, section=None, virtual_host=None):
    """Points the ini file of a service (package) at the messaging backends."""
    if not section:
        section = DEFAULT_SECTION
    LOG.info("Configuring %s messaging in %s.", colorizer.quote(package), path)
    ini_parser.iniset(path, section, TRANSPORT_URL_OPTION,
                      get_transport_url(settings, virtual_host))
    ini_parser.iniset(path, NOTIFICATIONS_SECTION, TRANSPORT_URL_OPTION,
                      get_notification_url(settings, virtual_host))
    return path


def add_vhost(settings, virtual_host, distro=None):
    """Only the rabbit notification bus knows about virtual hosts; the
    AMQP 1.0 backends use the virtual host as an address prefix.
    """
    if settings.notify_backend != amqp1_settings.RABBIT:
        LOG.debug("Skipping virtual host %r creation for service %s.",
                  virtual_host, settings.service)
        return False
    if distro is None:
        distro = amqp1_distro.load(amqp1_settings.DISTRO_DIR)
    rabbit.add_vhost(distro, settings, virtual_host)
    return True
