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

import getpass
import os
import pwd
import shutil
import subprocess

from amqp1 import env
from amqp1 import exceptions as excp
from amqp1 import log as logging

LOG = logging.getLogger(__name__)

# Take over some functions directly from os.path/os/... so that we don't have
# to type as many long function names to access these.
exists = os.path.exists
basename = os.path.basename
dirname = os.path.dirname
isfile = os.path.isfile
isdir = os.path.isdir
geteuid = os.geteuid
getegid = os.getegid

SUDO_CMD = ['sudo']


def got_root():
    e_id = geteuid()
    g_id = getegid()
    for a_id in [e_id, g_id]:
        if a_id != 0:
            return False
    return True


def _root_prefix(run_as_root):
    if run_as_root and not got_root():
        return list(SUDO_CMD)
    return []


# Originally borrowed from nova computes execute...
def execute(cmd,
            process_input=None,
            check_exit_code=True,
            env_overrides=None,
            run_as_root=False):
    """Helper method to execute command.

    :param cmd:             Passed to subprocess.Popen
    :param process_input:   Send to opened process
    :param check_exit_code: Single `bool`, `int`, or `list` of allowed exit
                            codes.  By default, only 0 exit code is allowed.
                            Raise :class:`exceptions.ProcessExecutionError`
                            unless program exits with one of these code
    :param env_overrides:   Extra environment variables for the command
    :param run_as_root:     Prefix the command with sudo (unless already root)

    :returns: a tuple, (stdout, stderr) from the spawned process
    """
    ignore_exit_code = False
    if isinstance(check_exit_code, bool):
        ignore_exit_code = not check_exit_code
        check_exit_code = [0]
    elif isinstance(check_exit_code, int):
        check_exit_code = [check_exit_code]

    prefix = _root_prefix(run_as_root)
    if prefix and env_overrides:
        # sudo resets the environment, it has to be told the overrides.
        prefix.extend("%s=%s" % (k, v) for (k, v) in sorted(env_overrides.items()))
    # Ensure all string args (ie for those that send ints and such...)
    execute_cmd = prefix + [str(c) for c in cmd]
    str_cmd = " ".join(shellquote(word) for word in execute_cmd)
    LOG.debug("Running cmd: %r", execute_cmd)

    process_env = None
    if env_overrides:
        process_env = env.get()
        for (k, v) in env_overrides.items():
            process_env[k] = str(v)

    try:
        obj = subprocess.Popen(execute_cmd,
                               stdin=subprocess.PIPE,
                               stdout=subprocess.PIPE,
                               stderr=subprocess.PIPE,
                               close_fds=True,
                               env=process_env,
                               universal_newlines=True)
        if process_input is not None:
            result = obj.communicate(str(process_input))
        else:
            result = obj.communicate()
    except OSError as e:
        raise excp.ProcessExecutionError(description="%s: [%s, %s]" % (e, e.errno, e.strerror),
                                         cmd=str_cmd)
    rc = obj.returncode
    stdout = result[0] or ""
    stderr = result[1] or ""
    if (not ignore_exit_code) and (rc not in check_exit_code):
        raise excp.ProcessExecutionError(exit_code=rc, stdout=stdout,
                                         stderr=stderr, cmd=str_cmd)
    if rc not in check_exit_code:
        LOG.debug("A failure may of just happened when running command %r [%s] (%s, %s)",
                  str_cmd, rc, stdout, stderr)
    return (stdout, stderr)


def shellquote(text):
    if text.isalnum():
        return text
    return "'%s'" % text.replace("'", "'\\''")


def joinpths(*paths):
    return os.path.join(*paths)


def getuser():
    return getpass.getuser()


def gethomedir(user=None):
    if not user:
        user = getuser()
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError:
        return os.path.expanduser("~")


def load_file(fn):
    with open(fn, "r") as fh:
        return fh.read()


def write_file(fn, text, run_as_root=False, quiet=False):
    if not quiet:
        LOG.debug("Writing to file %r (%d bytes)", fn, len(text))
        LOG.debug("> %s", text)
    if _root_prefix(run_as_root):
        execute(['tee', fn], process_input=text, run_as_root=True)
    else:
        mkdir(dirname(fn))
        with open(fn, "w") as fh:
            fh.write(text)
            fh.flush()
    return fn


def touch_file(fn, run_as_root=False):
    LOG.debug("Touching file %r", fn)
    if _root_prefix(run_as_root):
        execute(['touch', fn], run_as_root=True)
    else:
        with open(fn, "a"):
            os.utime(fn, None)
    return fn


def mkdir(path, mode=None, run_as_root=False):
    if not path or isdir(path):
        return path
    LOG.debug("Recursively creating directory %r", path)
    if _root_prefix(run_as_root):
        cmd = ['mkdir', '-p']
        if mode is not None:
            cmd.extend(['-m', "%o" % (mode)])
        execute(cmd + [path], run_as_root=True)
    else:
        if mode is not None:
            os.makedirs(path, mode)
        else:
            os.makedirs(path)
    return path


def chmod(fname, mode, run_as_root=False):
    """Changes the mode of a file.

    The mode may be numeric or a symbolic adjustment (for example
    ``o+r``) as understood by the chmod program.
    """
    if not isinstance(mode, str):
        mode = "%o" % (mode)
    LOG.debug("Applying chmod: %r to %s", fname, mode)
    execute(['chmod', mode, fname], run_as_root=run_as_root)
    return fname


def unlink(path, ignore_errors=True, run_as_root=False):
    LOG.debug("Unlinking (removing) %r", path)
    if _root_prefix(run_as_root):
        execute(['rm', '-f', path], run_as_root=True,
                check_exit_code=not ignore_errors)
        return
    try:
        os.unlink(path)
    except OSError:
        if not ignore_errors:
            raise


def is_writable(path):
    if exists(path):
        return os.access(path, os.W_OK)
    return os.access(dirname(path) or os.curdir, os.W_OK)


def which(bin_name, additional_dirs=None):
    full_name = shutil.which(bin_name)
    if full_name:
        return full_name
    for dir_name in (additional_dirs or []):
        full_name = shutil.which(bin_name, path=dir_name)
        if full_name:
            return full_name
    raise excp.FileException("Can't find %s" % bin_name)
