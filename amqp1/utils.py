# vim: tabstop=4 shiftwidth=4 softtabstop=4

#    Copyright (C) 2012 Yahoo! Inc. All Rights Reserved.
#
#    Copyright 2011 OpenStack LLC.
#    All Rights Reserved.
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

import yaml

from Cheetah.Template import Template

from amqp1 import colorizer
from amqp1 import log as logging
from amqp1 import settings
from amqp1 import shell as sh

LOG = logging.getLogger(__name__)


def expand_template(contents, params):
    if not params:
        params = {}
    tpl = Template(source=str(contents),
                   searchList=[params],
                   compilerSettings={
                       'useErrorCatcher': True})
    return tpl.respond()


def expand_template_deep(root, params):
    if isinstance(root, str):
        return expand_template(root, params)
    if isinstance(root, (list, tuple)):
        n_list = []
        for i in root:
            n_list.append(expand_template_deep(i, params))
        return n_list
    return root


def load_yaml(path):
    return load_yaml_text(sh.load_file(path))


def load_yaml_text(text):
    return yaml.safe_load(text)


def has_any(text, *look_for):
    if not look_for:
        return False
    for v in look_for:
        if text.find(v) != -1:
            return True
    return False


def get_deep(items, path, quiet=True):
    if len(path) == 0:
        return items

    head = path[0]
    remainder = path[1:]
    if isinstance(items, (list, tuple)):
        index = int(head)
        if quiet and not (index < len(items) and index >= 0):
            return None
        else:
            return get_deep(items[index], remainder)
    else:
        get_method = getattr(items, 'get', None)
        if not get_method:
            if not quiet:
                raise RuntimeError("Can not figure out how to extract an item from %s" % (items))
            else:
                return None
        else:
            return get_deep(get_method(head), remainder)


def load_template(component, template_name):
    path = sh.joinpths(settings.TEMPLATE_DIR, component, template_name)
    return (path, sh.load_file(path))


def render_template(component, template_name, params):
    (path, contents) = load_template(component, template_name)
    LOG.debug("Rendering template %s", path)
    return expand_template(contents, params)


def log_iterable(to_log, header=None, logger=None, color='blue'):
    if not logger:
        logger = LOG
    if not to_log:
        if not header:
            return
        if header.endswith(":"):
            header = header[0:-1]
        if not header.endswith("."):
            header = header + "."
        logger.info(header)
        return
    if header:
        if not header.endswith(":"):
            header += ":"
        logger.info(header)
    for c in to_log:
        if color:
            c = colorizer.color(c, color)
        logger.info("|-- %s", c)
