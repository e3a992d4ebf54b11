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
import textwrap

from optparse import IndentedHelpFormatter
from optparse import OptionParser

from amqp1 import actions
from amqp1 import version

OVERVIEW = """Overview: Installs, configures and starts the AMQP 1.0 messaging
backends (qpidd and/or qdrouterd) of a devstack deployment and tells
the other services how to reach them."""

# Command name => (minimum, maximum) amount of positional arguments
COMMANDS = {
    # Devstack plugin entry points
    'stack': (1, 1),
    'unstack': (0, 1),
    'clean': (0, 1),
    # Devstack rpc_backend overrides
    'get_transport_url': (0, 1),
    'get_notification_url': (0, 1),
    'iniset_rpc_backend': (2, 4),
    'rpc_backend_add_vhost': (1, 1),
}
for _name in actions.names():
    COMMANDS[_name] = (0, 0)

COMMAND_USAGE = {
    'stack': 'stack <pre-install|install|post-config|extra>',
    'iniset_rpc_backend': 'iniset_rpc_backend <package> <file> [section] [vhost]',
    'get_transport_url': 'get_transport_url [vhost]',
    'get_notification_url': 'get_notification_url [vhost]',
    'rpc_backend_add_vhost': 'rpc_backend_add_vhost <vhost>',
}


def _format_list(in_list):
    sorted_list = sorted(in_list)
    return "[" + ", ".join(sorted_list) + "]"


class Amqp1HelpFormatter(IndentedHelpFormatter):
    def _wrap_it(self, text):
        return textwrap.fill(text, width=self.width,
                             initial_indent="", subsequent_indent="  ")

    def format_usage(self, usage):
        buf = io.StringIO()
        buf.write(IndentedHelpFormatter.format_usage(self, usage))
        buf.write("\n")
        buf.write(self._wrap_it(OVERVIEW))
        buf.write("\n\n")
        buf.write("Commands:\n")
        for k in sorted(COMMANDS.keys()):
            buf.write("  %s\n" % (COMMAND_USAGE.get(k, k)))
        return buf.getvalue()


def parse(argv=None):

    version_str = "%s v%s" % ('amqp1', version.version_string())
    help_formatter = Amqp1HelpFormatter(width=120)
    parser = OptionParser(version=version_str, formatter=help_formatter,
                          usage="%prog [options] COMMAND [ARGS...]",
                          prog='amqp1')

    # Root options
    parser.add_option("-v", "--verbose",
                      action="store_true",
                      dest="verbose",
                      default=False,
                      help="make the output logging verbose")

    # Devstack passes arguments (ie the vhost) that may look like options
    parser.disable_interspersed_args()

    (options, args) = parser.parse_args(argv)
    values = {}
    values['verbose'] = options.verbose
    if args:
        values['command'] = args[0].strip()
        values['args'] = args[1:]
    else:
        values['command'] = ''
        values['args'] = []
    return values


def check_args(command, args):
    """Returns an error message when a command is unknown or given the
    wrong amount of arguments (none when all is fine).
    """
    if not command:
        return "No command specified, expected one of %s" % (_format_list(COMMANDS.keys()))
    if command not in COMMANDS:
        return "Unknown command %r, expected one of %s" % (command, _format_list(COMMANDS.keys()))
    (min_args, max_args) = COMMANDS[command]
    if not (min_args <= len(args) <= max_args):
        return "Invalid arguments %s for command %r, usage: %s" % (args, command,
                                                                   COMMAND_USAGE.get(command, command))
    return None
