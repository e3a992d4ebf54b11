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

import sys
import time
import traceback as tb

from amqp1 import actions
from amqp1 import colorizer
from amqp1 import distro
from amqp1 import exceptions as excp
from amqp1 import log as logging
from amqp1 import opts
from amqp1 import rpc_backend
from amqp1 import settings as amqp1_settings
from amqp1 import shell as sh


LOG = logging.getLogger()


def ensure_perms():
    # Root only commands are ran via sudo when not already root
    if sh.got_root():
        return
    try:
        sh.which('sudo')
    except excp.FileException:
        raise excp.PermException("Root access (or sudo) required")


def run_action(action, settings, dist=None):
    """Runs the named action over the wanted components."""
    runner_cls = actions.class_for(action)
    ensure_perms()
    if dist is None:
        dist = distro.load(amqp1_settings.DISTRO_DIR)
    LOG.info("Starting action %s for distro %s (messaging %s).",
             colorizer.quote(action), colorizer.quote(dist.name), settings)
    runner = runner_cls(name=action, distro=dist, settings=settings)
    start_time = time.time()
    runner.run()
    end_time = time.time()
    LOG.info("It took %.2f seconds to complete action %s.",
             end_time - start_time, colorizer.quote(action))
    if action == 'status' and not runner.all_started():
        raise excp.StatusException("Not all messaging backends are running")
    return runner


def run_hook(mode, phase, settings):
    action = actions.for_hook(mode, phase)
    if not action:
        LOG.debug("Nothing to do for devstack %s %s.", mode, phase or '')
        return None
    return run_action(action, settings)


def run(args):
    """Starts the execution after args have been parsed and logging has been setup.
    """
    command = args['command']
    cmd_args = list(args['args'])
    problem = opts.check_args(command, cmd_args)
    if problem:
        raise excp.OptionException(problem)

    settings = amqp1_settings.Settings()
    LOG.debug("Using messaging settings: %s", settings)

    def arg(index):
        if index < len(cmd_args):
            return cmd_args[index]
        return None

    if command == 'get_transport_url':
        print(rpc_backend.get_transport_url(settings, arg(0)))
    elif command == 'get_notification_url':
        print(rpc_backend.get_notification_url(settings, arg(0)))
    elif command == 'iniset_rpc_backend':
        rpc_backend.iniset_rpc_backend(settings, arg(0), arg(1),
                                       section=arg(2), virtual_host=arg(3))
    elif command == 'rpc_backend_add_vhost':
        rpc_backend.add_vhost(settings, arg(0))
    elif command in ('stack', 'unstack', 'clean'):
        run_hook(command, arg(0), settings)
    else:
        run_action(command, settings)


def main(argv=None):
    """Starts the execution of amqp1 without injecting variables into
    the global namespace. Ensures that logging is setup.

    Arguments: N/A
    Returns: 0 for success, 1 for failure and 2 for permission failures.
    """

    args = opts.parse(argv)

    # Configure logging levels
    log_level = logging.INFO
    if args['verbose']:
        log_level = logging.DEBUG
    logging.setupLogging(log_level)
    LOG.debug("Log level is: %s" % (logging.getLevelName(log_level)))

    # Standard output only carries command results (ie urls)
    def print_exc(exc):
        if not exc:
            return
        msg = str(exc).strip()
        if not msg:
            return
        if not (msg.endswith(".") or msg.endswith("!")):
            msg = msg + "."
        print(msg, file=sys.stderr)

    def print_traceback():
        (exc_type, exc_value, traceback) = sys.exc_info()
        if log_level >= logging.INFO:
            # When its not none u get more detailed info about the exception
            traceback = None
        tb.print_exception(exc_type, exc_value, traceback, file=sys.stderr)

    try:
        run(args)
        return 0
    except excp.PermException as e:
        print_exc(e)
        print(("This program should be running as root (or with %s access)"
               " as it performs some root-only commands is it not?")
              % (colorizer.quote('sudo', quote_color='red')), file=sys.stderr)
        return 2
    except excp.OptionException as e:
        print_exc(e)
        print("Perhaps you should try %s" % (colorizer.quote('--help', quote_color='red')),
              file=sys.stderr)
        return 1
    except excp.Amqp1Exception as e:
        print_exc(e)
        return 1
    except Exception:
        print_traceback()
        return 1


if __name__ == "__main__":
    sys.exit(main())
