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

import collections

from urllib import parse

from amqp1 import exceptions as excp

DEFAULT_PORT = 5672

TransportHost = collections.namedtuple(  # pylint: disable=C0103
    "TransportHost", 'hostname,port,username,password')


def _parse_host_port(address, url):
    if address.startswith('['):
        # IPv6 literal, ie [::1]:5672
        (host, sep, rest) = address[1:].partition(']')
        if not sep:
            raise excp.InvalidTransportURL(url, "Unterminated IPv6 address")
        port = rest[1:] if rest.startswith(':') else ''
    elif ':' in address:
        (host, _sep, port) = address.rpartition(':')
    else:
        (host, port) = (address, '')
    if not port:
        return (host, None)
    try:
        return (host, int(port))
    except ValueError:
        raise excp.InvalidTransportURL(url, "Invalid port %r" % (port))


def _format_host(hostname):
    if ':' in hostname:
        return "[%s]" % (hostname)
    return hostname


class TransportURL(object):
    """A parsed transport URL.

    Transport URLs take the form::

      transport://[user:pass@]host:port[,[userN:passN@]hostN:portN]/virtual_host

    The password may be empty (``user:@host:port``) in which case it is
    prompted for when the backend gets configured.
    """

    def __init__(self, transport, hosts=None, virtual_host=None):
        self.transport = transport
        self.hosts = list(hosts or [])
        self.virtual_host = virtual_host

    @property
    def primary(self):
        """The host that a locally deployed backend is configured for."""
        if not self.hosts:
            raise excp.InvalidTransportURL(str(self), "No host specified")
        return self.hosts[0]

    @property
    def port(self):
        port = self.primary.port
        if port is None:
            return DEFAULT_PORT
        return port

    @property
    def username(self):
        return self.primary.username

    @property
    def password(self):
        return self.primary.password

    def __eq__(self, other):
        if not isinstance(other, TransportURL):
            return NotImplemented
        return (self.transport == other.transport and
                self.hosts == other.hosts and
                self.virtual_host == other.virtual_host)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "%s(%r, %r, %r)" % (type(self).__name__, self.transport,
                                   self.hosts, self.virtual_host)

    def __str__(self):
        netlocs = []
        for host in self.hosts:
            netlocs.append(_make_netloc(host.hostname, host.port,
                                        username=host.username,
                                        password=host.password))
        url = "%s://%s" % (self.transport, ",".join(netlocs))
        if self.virtual_host is not None:
            url = join_virtual_host(url, parse.quote(self.virtual_host))
        return url

    @classmethod
    def parse(cls, url):
        """Parse a URL as defined by :py:class:`TransportURL` and return a
        TransportURL object.
        """
        if not isinstance(url, str):
            raise excp.InvalidTransportURL(url, 'Wrong URL type')
        url_text = url.strip()
        # Without '//' urlsplit takes 'host:port' as a scheme and a path.
        if '://' not in url_text:
            raise excp.InvalidTransportURL(url, 'No scheme specified')
        pieces = parse.urlsplit(url_text)
        if not pieces.scheme:
            raise excp.InvalidTransportURL(url, 'No scheme specified')

        virtual_host = None
        if pieces.path.startswith('/'):
            virtual_host = parse.unquote(pieces.path[1:])

        hosts = []
        for host in pieces.netloc.split(','):
            if not host:
                continue
            username = password = None
            if '@' in host:
                (username, host) = host.rsplit('@', 1)
                if ':' in username:
                    (username, password) = username.split(':', 1)
                    password = parse.unquote(password)
                username = parse.unquote(username)
            (hostname, port) = _parse_host_port(host, url)
            hosts.append(TransportHost(hostname=hostname, port=port,
                                       username=username or None,
                                       password=password))
        return cls(pieces.scheme, hosts=hosts, virtual_host=virtual_host)


def _make_netloc(host, port, username=None, password=None):
    netloc = _format_host(host)
    if port is not None:
        netloc = "%s:%s" % (netloc, port)
    if username:
        netloc = "%s:%s@%s" % (parse.quote(username, safe=''),
                               parse.quote(password or '', safe=''),
                               netloc)
    return netloc


def make_transport_url(host, port, username=None, password=None,
                       transport='amqp'):
    """Builds ``transport://[user:pass@]host:port`` (no virtual host)."""
    return "%s://%s" % (transport, _make_netloc(host, port,
                                                username=username,
                                                password=password))


def join_virtual_host(url, virtual_host):
    """Appends a virtual host to a url that may already end in a slash."""
    if virtual_host is None:
        virtual_host = ''
    return "%s/%s" % (url.rstrip('/'), virtual_host)
