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
import re

from configparser import DEFAULTSECT
from configparser import NoOptionError
from configparser import NoSectionError

import iniparse
from iniparse import ini

from amqp1 import log as logging
from amqp1 import shell as sh

LOG = logging.getLogger(__name__)

# A commented out option such as "#transport_url = <None>", group 1 is
# the option name.
COMMENTED_OPTION = re.compile(
    r"""
        ^[;#]\s*            # comment marker
        ([^:=\s[][^:=]*?)   # option name
        \s*[:=].*$          # separator and (ignored) value
    """, re.VERBOSE)


class RewritableConfigParser(iniparse.RawConfigParser):
    """Ini parser that keeps a file's comments and layout when rewritten.

    Sample config files generated by oslo-config-generator document each
    option as a commented out line; a newly set option is placed right
    after its commented out twin (or at the top of its section when there
    is none) so the result still reads like the sample.
    """

    option_regex = COMMENTED_OPTION

    def __init__(self, fns=None):
        super(RewritableConfigParser, self).__init__()
        # Option names are case sensitive.
        self.optionxform = str
        for fn in fns or []:
            with open(fn, "r") as fh:
                self.readfp(fh, fn)

    def readfp(self, fp, filename=None):
        self.data._readfp(fp)
        self._adopt_comments()

    def get(self, section, option):
        try:
            return super(RewritableConfigParser, self).get(section, option)
        except (NoSectionError, NoOptionError):
            return None

    def set(self, section, option, value):
        if section.lower() != 'default' and not self.has_section(section):
            self.add_section(section)
        try:
            section_obj = self.data[section]
        except KeyError:
            raise NoSectionError(section)
        self._place_option(section_obj, option, value)

    def stringify(self):
        buf = io.StringIO()
        self.write(buf)
        return buf.getvalue()

    def write(self, fp):
        # iniparse keeps a DEFAULT section created through set() out of
        # its line data, so it has to be written out here.
        contents = "%s" % (self.data._data)
        written_default = False
        if DEFAULTSECT not in self._section_names():
            default_lines = ["%s" % (line)
                             for line in self.data[DEFAULTSECT]._lines]
            if any(default_lines):
                fp.write("%s\n" % (ini.SectionLine(DEFAULTSECT)))
                for line in default_lines:
                    fp.write("%s\n" % (line))
                written_default = True
        if written_default and contents:
            contents = "\n" + contents.lstrip()
        fp.write(contents)

    def _section_names(self):
        return set(obj.name for obj in self.data._data.contents
                   if isinstance(obj, ini.LineContainer))

    def _adopt_comments(self):
        # iniparse leaves comment lines at the top level; move each run of
        # them that ends in a commented out option into the section above.
        section = None
        pending = []
        adopted = []
        for obj in self.data._data.contents:
            if isinstance(obj, ini.LineContainer):
                section = obj
                pending = []
            elif section is not None:
                pending.append(obj)
                if self.option_regex.match(obj.line) is not None:
                    section.extend(pending)
                    adopted.extend(pending)
                    pending = []
        for obj in adopted:
            self.data._data.contents.remove(obj)

    def _place_option(self, section, option, value):
        if section._optionxform:
            key = section._optionxform(option)
        else:
            key = option
        if key in section._compat_skip_empty_lines:
            section._compat_skip_empty_lines.remove(key)
        if key not in section._options:
            lines = section._lines[-1].contents
            insert_at = 1
            for idx in range(len(lines) - 1, -1, -1):
                line = lines[idx]
                if isinstance(line, ini.LineContainer) or line.line is None:
                    continue
                match = self.option_regex.match(line.line)
                if match is not None and match.group(1) == key:
                    insert_at = idx + 1
                    break
            container = ini.LineContainer(ini.OptionLine(option, ''))
            lines.insert(insert_at, container)
            section._options[key] = container
        section._options[key].value = value


def iniset(path, section, option, value):
    """Sets an option in an ini file (creating it if needed), keeping the
    rest of the file (comments included) as it was.
    """
    fns = []
    if sh.isfile(path):
        fns.append(path)
    cfg = RewritableConfigParser(fns=fns)
    cfg.set(section, option, value)
    LOG.debug("Setting [%s] %s in %s", section, option, path)
    sh.write_file(path, cfg.stringify(),
                  run_as_root=not sh.is_writable(path))
    return path
