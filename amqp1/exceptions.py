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

import subprocess


class Amqp1Exception(Exception):
    pass


class PermException(Amqp1Exception):
    pass


class OptionException(Amqp1Exception):
    pass


class FileException(Amqp1Exception):
    pass


class ConfigException(Amqp1Exception):
    pass


class PackageException(Amqp1Exception):
    pass


class PasswordException(Amqp1Exception):
    pass


class StatusException(Amqp1Exception):
    pass


class DistroNotSupported(Amqp1Exception):
    """Raised when the host (or what is installed on it) can not be used."""

    def __init__(self, what):
        super(DistroNotSupported, self).__init__(
            "Distro not supported: %s" % (what))
        self.what = what


class InvalidTransportURL(ConfigException):
    """Raised if the transport URL is invalid."""

    def __init__(self, url, msg):
        super(InvalidTransportURL, self).__init__(
            "Invalid transport url %r: %s" % (url, msg))
        self.url = url


class ProcessExecutionError(IOError):
    MESSAGE_TPL = (
        '%(description)s\n'
        'Command: %(command)s\n'
        'Exit code: %(exit_code)s\n'
        'Stdout: %(stdout)s\n'
        'Stderr: %(stderr)s'
    )

    # Truncate stdout & stderr content to this many lines when creating a
    # process execution error (the full stdout/stderr can still be accessed).
    _TRUNCATED_OUTPUT_LINES = 7

    def __init__(self, cmd, exec_kwargs=None,
                 stdout='', stderr='', exit_code=None, description=None):
        if not isinstance(exit_code, int):
            exit_code = '-'
        if not description:
            description = 'Unexpected error while running command.'
        if not exec_kwargs:
            exec_kwargs = {}
        self._stdout = self._format(exec_kwargs.get('stdout'), stdout)
        self._stderr = self._format(exec_kwargs.get('stderr'), stderr)
        self.exit_code = exit_code
        message = self.MESSAGE_TPL % {
            'exit_code': exit_code,
            'command': cmd,
            'description': description,
            'stdout': self._truncate_lines(self._stdout),
            'stderr': self._truncate_lines(self._stderr),
        }
        IOError.__init__(self, message)

    @classmethod
    def _truncate_lines(cls, content):
        """Truncates a given text blob using the class defined line limit."""
        if not content:
            return content
        lines = content.splitlines(True)
        if len(lines) > cls._TRUNCATED_OUTPUT_LINES:
            content = "".join(lines[-cls._TRUNCATED_OUTPUT_LINES:])
            content += " (see debug log for more details...)"
        return content

    @staticmethod
    def _format(stream, output):
        if stream != subprocess.PIPE and stream is not None:
            return "<redirected to %s>" % stream.name
        return output

    @property
    def stdout(self):
        """Access the full (non-truncated) stdout."""
        return self._stdout

    @property
    def stderr(self):
        """Access the full (non-truncated) stderr."""
        return self._stderr
