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

TRUE_VALUES = ('true', 't', '1', 'on', 'yes', 'y')


def make_bool(val):
    if isinstance(val, bool):
        return val
    if val is None:
        return False
    if isinstance(val, str):
        sval = val.lower().strip()
        if sval in TRUE_VALUES:
            return True
        else:
            return False
    # Try to see if its convertible to an int...
    try:
        return bool(int(val))
    except (ValueError, TypeError):
        return False


def obj_name(obj):
    if isinstance(obj, type):
        return obj.__name__
    return obj.__class__.__name__
