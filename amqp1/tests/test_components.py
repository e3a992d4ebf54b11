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

import mock

from amqp1 import distro
from amqp1 import exceptions as exc
from amqp1 import settings
from amqp1 import shell as sh
from amqp1 import test

from amqp1.components import base_runtime
from amqp1.components import qdrouterd
from amqp1.components import qpidd

QPIDD_HELP = """Usage: qpidd [OPTIONS]
  --queue-patterns PATTERN     Pattern for on-demand queues
  --topic-patterns PATTERN     Pattern for on-demand topics
  --sasl-service-name NAME     The service name to specify for SASL
"""


class ComponentTestCase(test.MockTestCase):
    plt = 'fedora'

    def setUp(self):
        super(ComponentTestCase, self).setUp()
        self.distro = distro.load(settings.DISTRO_DIR, plt=self.plt)
        self.existing = set()
        self.outputs = {}
        self.passwords = mock.MagicMock()
        self.passwords.read.return_value = (True, 'remembered')

        self.execute = self._patch_function(sh, 'execute')
        self.execute.side_effect = self._fake_execute
        self.isfile = self._patch_function(sh, 'isfile')
        self.isfile.side_effect = lambda fn: fn in self.existing
        self.isdir = self._patch_function(sh, 'isdir')
        self.isdir.return_value = False
        self.which = self._patch_function(sh, 'which')
        self.which.side_effect = lambda name, additional_dirs=None: "/usr/sbin/%s" % name
        self.write_file = self._patch_function(sh, 'write_file')
        self.chmod = self._patch_function(sh, 'chmod')
        self.mkdir = self._patch_function(sh, 'mkdir')
        self.touch_file = self._patch_function(sh, 'touch_file')
        self.unlink = self._patch_function(sh, 'unlink')

    def _fake_execute(self, cmd, **kwargs):
        return (self.outputs.get(tuple(cmd), ''), '')

    def _make(self, name, action, environ=None):
        if environ is None:
            environ = {}
        d_component = self.distro.extract_component(name, action)
        return distro.importer.construct_entry_point(
            d_component.entry_point, name=name,
            options=d_component.options,
            siblings=d_component.siblings,
            distro=self.distro,
            settings=settings.Settings(environ),
            passwords=self.passwords)

    def _written(self):
        written = {}
        for (args, kwargs) in self.write_file.call_args_list:
            self.assertTrue(kwargs.get('run_as_root'))
            written[args[0]] = args[1]
        return written

    def _executed(self):
        return [c[0][0] for c in self.execute.call_args_list]


class TestQpidd(ComponentTestCase):

    def setUp(self):
        super(TestQpidd, self).setUp()
        self.existing.add('/etc/qpid/qpidd.conf')
        self.outputs[('/usr/sbin/qpidd', '--help')] = QPIDD_HELP

    def test_configure_no_auth(self):
        installer = self._make('qpidd', 'install', {'LOGDIR': '/tmp/logs'})
        self.assertEqual(2, installer.configure())
        written = self._written()
        self.assertEqual([
            'acl-file=/etc/qpid/qpidd.acl',
            'auth=no',
            'queue-patterns=exclusive',
            'queue-patterns=unicast',
            'topic-patterns=broadcast',
            'log-enable=info+',
            'log-to-file=/tmp/logs/qpidd.log',
            'log-to-syslog=yes',
            'max-connections=0',
            'sasl-service-name=amqp',
        ], written['/etc/qpid/qpidd.conf'].splitlines())
        self.assertEqual(['acl allow all all'],
                         written['/etc/qpid/qpidd.acl'].splitlines())
        self.chmod.assert_any_call('/etc/qpid/qpidd.conf', 'o+r', run_as_root=True)
        self.chmod.assert_any_call('/etc/qpid/qpidd.acl', 'o+r', run_as_root=True)
        self.chmod.assert_any_call('/tmp/logs/qpidd.log', 'a+rw', run_as_root=True)
        self.mkdir.assert_any_call('/etc/qpid', mode=0o755, run_as_root=True)
        self.touch_file.assert_any_call('/etc/qpid/qpidd.acl', run_as_root=True)
        self.touch_file.assert_any_call('/tmp/logs/qpidd.log', run_as_root=True)
        self.assertNotIn('saslpasswd2', [c[0] for c in self._executed()])
        self.assertFalse(self.passwords.read.called)

    def test_configure_old_conf_location(self):
        self.existing = set(['/etc/qpidd.conf', '/etc/qpid/qpidd.acl'])
        installer = self._make('qpidd', 'install')
        installer.configure()
        written = self._written()
        self.assertIn('/etc/qpidd.conf', written)
        self.assertFalse(self.touch_file.call_args_list[0][0][0].endswith('.acl'))

    def test_configure_without_sasl_service_name(self):
        self.outputs[('/usr/sbin/qpidd', '--help')] = "  --queue-patterns PATTERN\n"
        installer = self._make('qpidd', 'install')
        installer.configure()
        conf = self._written()['/etc/qpid/qpidd.conf']
        self.assertNotIn('sasl-service-name', conf)
        self.assertTrue(conf.endswith('max-connections=0\n'))

    def test_configure_with_auth(self):
        installer = self._make('qpidd', 'install', {'AMQP1_USERNAME': 'stack',
                                                    'AMQP1_PASSWORD': 'secret'})
        self.assertEqual(3, installer.configure())
        written = self._written()
        self.assertIn('auth=yes', written['/etc/qpid/qpidd.conf'].splitlines())
        self.assertEqual(['group admin stack@QPID',
                          'acl allow admin all',
                          'acl deny all all'],
                         written['/etc/qpid/qpidd.acl'].splitlines())
        self.assertEqual(['pwcheck_method: auxprop',
                          'auxprop_plugin: sasldb',
                          'sasldb_path: /var/lib/qpidd/qpidd.sasldb',
                          'mech_list: PLAIN',
                          'sql_select: dummy select'],
                         written['/etc/sasl2/qpidd.conf'].splitlines())
        self.execute.assert_any_call(['saslpasswd2', '-c', '-p', '-f',
                                      '/var/lib/qpidd/qpidd.sasldb',
                                      '-u', 'QPID', 'stack'],
                                     process_input='secret\n', run_as_root=True)
        self.mkdir.assert_any_call('/var/lib/qpidd', mode=0o755, run_as_root=True)
        self.chmod.assert_any_call('/var/lib/qpidd/qpidd.sasldb', 'o+r', run_as_root=True)
        self.assertFalse(self.passwords.read.called)

    def test_configure_asks_for_password(self):
        installer = self._make('qpidd', 'install', {'AMQP1_USERNAME': 'stack'})
        installer.configure()
        self.passwords.read.assert_called_once_with(
            'qpidd_stack', 'ENTER A PASSWORD FOR QPID USER stack')
        self.execute.assert_any_call(['saslpasswd2', '-c', '-p', '-f',
                                      '/var/lib/qpidd/qpidd.sasldb',
                                      '-u', 'QPID', 'stack'],
                                     process_input='remembered\n', run_as_root=True)

    def test_warm_configs_asks_once(self):
        installer = self._make('qpidd', 'install', {'AMQP1_USERNAME': 'stack'})
        installer.warm_configs()
        installer.configure()
        self.assertEqual(1, self.passwords.read.call_count)

    def test_configure_uses_notify_url(self):
        installer = self._make('qpidd', 'install', {
            'AMQP1_SERVICE': 'qpid-dual',
            'AMQP1_RPC_TRANSPORT_URL': 'amqp://router:45672',
            'AMQP1_NOTIFY_TRANSPORT_URL': 'amqp://bob:pw@broker:5672',
        })
        installer.configure()
        self.execute.assert_any_call(['saslpasswd2', '-c', '-p', '-f',
                                      '/var/lib/qpidd/qpidd.sasldb',
                                      '-u', 'QPID', 'bob'],
                                     process_input='pw\n', run_as_root=True)

    def test_configure_no_conf(self):
        self.existing = set()
        installer = self._make('qpidd', 'install')
        err = self.assertRaises(exc.DistroNotSupported, installer.configure)
        self.assertEqual("qpidd.conf file not found!", err.what)
        self.assertFalse(self.write_file.called)

    def test_configure_no_amqp1_support(self):
        self.outputs[('/usr/sbin/qpidd', '--help')] = "Usage: qpidd [OPTIONS]\n"
        installer = self._make('qpidd', 'install')
        err = self.assertRaises(exc.DistroNotSupported, installer.configure)
        self.assertEqual("qpidd with AMQP 1.0 support", err.what)
        self.assertFalse(self.write_file.called)

    def test_install_packages(self):
        self.execute.side_effect = [exc.ProcessExecutionError('rpm -q'), ('', '')]
        installer = self._make('qpidd', 'install')
        self.assertEqual(1, installer.install())
        self.assertEqual(['dnf', 'install', '-y', 'qpid-cpp-server'], self._executed()[-1])

    def test_restart(self):
        runtime = self._make('qpidd', 'running')
        self.assertEqual(1, runtime.restart())
        self.execute.assert_called_once_with(['systemctl', 'restart', 'qpidd'],
                                             run_as_root=True)

    def test_restart_failure(self):
        self.execute.side_effect = exc.ProcessExecutionError('systemctl')
        runtime = self._make('qpidd', 'running')
        self.assertRaises(exc.StatusException, runtime.restart)

    def test_statii(self):
        self.execute.side_effect = exc.ProcessExecutionError('systemctl')
        runtime = self._make('qpidd', 'running')
        statii = runtime.statii()
        self.assertEqual(1, len(statii))
        self.assertEqual('qpidd', statii[0].name)
        self.assertEqual(base_runtime.STATUS_STOPPED, statii[0].status)

    def test_uninstall(self):
        uninstaller = self._make('qpidd', 'uninstall')
        self.assertEqual(1, uninstaller.uninstall())
        self.assertEqual(['dnf', 'remove', '-y', 'qpid-cpp-server'], self._executed()[-1])
        uninstaller.post_uninstall()
        self.unlink.assert_any_call('/etc/sasl2/qpidd.conf', run_as_root=True)
        self.unlink.assert_any_call('/var/lib/qpidd/qpidd.sasldb', run_as_root=True)


class TestQdrouterd(ComponentTestCase):

    def setUp(self):
        super(TestQdrouterd, self).setUp()
        self.existing.add('/etc/qpid-dispatch/qdrouterd.conf')
        self.outputs[('/usr/sbin/qdrouterd', '-v')] = "1.19.0\n"

    def test_listener_field(self):
        self.assertEqual('addr', qdrouterd.listener_field('0.8.0'))
        self.assertEqual('addr', qdrouterd.listener_field('0.6.1\n'))
        self.assertEqual('host', qdrouterd.listener_field('1.19.0'))
        self.assertEqual('host', qdrouterd.listener_field('10.0.0'))

    def test_configure_no_auth(self):
        installer = self._make('qdrouterd', 'install', {'AMQP1_SERVICE': 'qpid-dual',
                                                        'LOGDIR': '/tmp/logs'})
        self.assertEqual(1, installer.configure())
        lines = self._written()['/etc/qpid-dispatch/qdrouterd.conf'].splitlines()
        self.assertEqual([
            'router {',
            '    mode: standalone',
            '    id: Router.A',
            '    workerThreads: 4',
            '    saslConfigPath: /etc/sasl2',
            '    saslConfigName: qdrouterd',
            '}',
            '',
            'listener {',
            '    host: 0.0.0.0',
            '    port: 45672',
            '    role: normal',
            '    authenticatePeer: no',
            '}',
            '',
            'address {',
            '    prefix: unicast',
            '    distribution: closest',
            '}',
            '',
        ], lines[0:20])
        self.assertEqual([
            'log {',
            '    module: DEFAULT',
            '    enable: trace+',
            '    output: /tmp/logs/qdrouterd.log',
            '}',
        ], lines[-5:])
        self.assertEqual(9, lines.count('address {'))
        for (prefix, distribution) in qdrouterd.ADDRESSES:
            idx = lines.index('    prefix: %s' % prefix)
            self.assertEqual('    distribution: %s' % distribution, lines[idx + 1])
        self.chmod.assert_any_call('/etc/qpid-dispatch/qdrouterd.conf', 'o+r',
                                   run_as_root=True)
        self.chmod.assert_any_call('/tmp/logs/qdrouterd.log', 'a+rw', run_as_root=True)

    def test_configure_old_router(self):
        self.outputs[('/usr/sbin/qdrouterd', '-v')] = "0.8.0\n"
        installer = self._make('qdrouterd', 'install', {'AMQP1_SERVICE': 'qpid-dual'})
        installer.configure()
        lines = self._written()['/etc/qpid-dispatch/qdrouterd.conf'].splitlines()
        self.assertIn('    addr: 0.0.0.0', lines)
        self.assertNotIn('    host: 0.0.0.0', lines)

    def test_configure_given_port(self):
        installer = self._make('qdrouterd', 'install', {
            'AMQP1_SERVICE': 'qpid-hybrid',
            'AMQP1_RPC_TRANSPORT_URL': 'amqp://localhost:12345'})
        installer.configure()
        lines = self._written()['/etc/qpid-dispatch/qdrouterd.conf'].splitlines()
        self.assertIn('    port: 12345', lines)

    def test_configure_with_auth(self):
        installer = self._make('qdrouterd', 'install', {'AMQP1_SERVICE': 'qpid-dual',
                                                        'AMQP1_USERNAME': 'stack'})
        self.assertEqual(2, installer.configure())
        written = self._written()
        lines = written['/etc/qpid-dispatch/qdrouterd.conf'].splitlines()
        self.assertIn('    authenticatePeer: yes', lines)
        self.assertIn('sasldb_path: /var/lib/qdrouterd/qdrouterd.sasldb',
                      written['/etc/sasl2/qdrouterd.conf'].splitlines())
        self.passwords.read.assert_called_once_with(
            'qdrouterd_stack', 'ENTER A PASSWORD FOR QPID DISPATCH USER stack')
        self.execute.assert_any_call(['saslpasswd2', '-c', '-p', '-f',
                                      '/var/lib/qdrouterd/qdrouterd.sasldb', 'stack'],
                                     process_input='remembered\n', run_as_root=True)

    def test_configure_no_conf(self):
        self.existing = set()
        installer = self._make('qdrouterd', 'install', {'AMQP1_SERVICE': 'qpid-dual'})
        err = self.assertRaises(exc.DistroNotSupported, installer.configure)
        self.assertEqual("qdrouterd.conf file not found!", err.what)

    def test_uninstall(self):
        uninstaller = self._make('qdrouterd', 'uninstall', {'AMQP1_SERVICE': 'qpid-dual'})
        self.assertEqual(1, uninstaller.uninstall())
        self.assertEqual(['dnf', 'remove', '-y', 'qpid-dispatch-router'],
                         self._executed()[-1])


class TestUbuntuComponents(ComponentTestCase):
    plt = 'ubuntu'

    def test_general_adds_repositories(self):
        general = self._make('general', 'install')
        general.pre_install()
        self.assertEqual([['add-apt-repository', '-y', 'ppa:qpid/released'],
                          ['apt-get', 'update']], self._executed())

    def test_general_installs(self):
        # dpkg output without an installed status
        general = self._make('general', 'install')
        self.assertEqual(1, general.install())
        self.assertEqual([['dpkg', '-s', 'sasl2-bin'],
                          ['apt-get', 'install', '-y', 'sasl2-bin']], self._executed())

    def test_pyngus_installs(self):
        self.execute.side_effect = [
            ('', ''),
            ('', ''),
            exc.ProcessExecutionError('pip show'),
            ('', ''),
        ]
        pyngus = self._make('pyngus', 'install', {'PYTHON': 'python3'})
        self.assertEqual(2, pyngus.install())
        executed = self._executed()
        self.assertEqual(['apt-get', 'install', '-y', 'python3-qpid-proton'], executed[1])
        self.assertEqual(['python3', '-m', 'pip', 'install', '-q', 'pyngus'], executed[3])

    def test_uninstall_packages(self):
        self.outputs[('dpkg', '-s', 'qdrouterd')] = "Status: install ok installed\n"
        uninstaller = self._make('qdrouterd', 'uninstall', {'AMQP1_SERVICE': 'qpid-dual'})
        self.assertEqual(1, uninstaller.uninstall())
        self.assertEqual(['apt-get', 'purge', '-y', 'qdrouterd'], self._executed()[-1])
