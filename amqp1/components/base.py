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

from amqp1 import exceptions as excp
from amqp1 import log as logging
from amqp1 import passwords as pw
from amqp1 import transport_url as turl
from amqp1 import type_utils as tu
from amqp1 import utils

LOG = logging.getLogger(__name__)


class Component(object):
    def __init__(self, name, options, siblings, distro, settings,
                 instances=None, passwords=None, **kwargs):
        # The component name (from config)
        self.name = name

        # Any component options
        self.options = options

        # All the other active instances
        if instances is None:
            instances = {}
        self.instances = instances

        # All the other class names that can be used alongside this class
        self.siblings = siblings

        # The distribution 'interaction object'
        self.distro = distro

        # The (environment provided) plugin settings
        self.settings = settings

        # Where passwords get remembered (created on first use)
        self._passwords = passwords

        # The (username, password) once known
        self._credentials = None

    @property
    def passwords(self):
        if self._passwords is None:
            self._passwords = pw.KeyringProxy(self.settings.keyring_path)
        return self._passwords

    def get_option(self, option, *options, **kwargs):
        option_value = utils.get_deep(self.options, [option] + list(options))
        if option_value is None:
            return kwargs.get('default_value')
        else:
            return option_value

    def get_int_option(self, option, *options, **kwargs):
        if 'default_value' not in kwargs:
            kwargs['default_value'] = 0
        return int(self.get_option(option, *options, **kwargs))

    @property
    def daemon(self):
        return self.get_option('daemon', default_value=self.name)

    @property
    def transport_url(self):
        """The parsed url that clients use to reach this component."""
        return turl.TransportURL.parse(self.settings.transport_url_for(self.name))

    def get_credentials(self, prompt):
        """Returns the (username, password) the component should accept.

        The username is none when authentication is not wanted; the
        password (when absent from the transport url) is fetched from
        the keyring or asked for.
        """
        if self._credentials is not None:
            return self._credentials
        url = self.transport_url
        username = url.username
        if not username:
            self._credentials = (None, None)
            return self._credentials
        password = url.password
        if not password:
            password = pw.read_password(self.passwords,
                                        "%s_%s" % (self.name, username),
                                        prompt % (username))
        if not password:
            raise excp.PasswordException("No password available for %s user %s"
                                         % (self.name, username))
        self._credentials = (username, password)
        return self._credentials

    def verify(self):
        pass

    def warm_configs(self):
        # Before any actions occur you get the chance to
        # warmup the configs u might use (ie for prompting for passwords
        # earlier rather than later)
        pass

    def __str__(self):
        return "%s@%s" % (tu.obj_name(self), self.name)
