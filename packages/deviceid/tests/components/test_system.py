from unittest.mock import patch

from deviceid.components.system import MachineNameComponent, OsVersionComponent, UserNameComponent


def test_user_name():
    with patch('deviceid.components.system.getpass.getuser', return_value='Alice'):
        assert UserNameComponent().produce() == 'Alice'
        assert UserNameComponent(normalize=True).produce() == 'alice'


def test_user_name_unavailable():
    with patch('deviceid.components.system.getpass.getuser', side_effect=OSError('no user')):
        assert UserNameComponent().produce() is None


def test_machine_name():
    with patch('deviceid.components.system.platform.node', return_value='build-01'):
        assert MachineNameComponent().produce() == 'build-01'
    with patch('deviceid.components.system.platform.node', return_value=''):
        assert MachineNameComponent().produce() is None


def test_os_version():
    with patch('deviceid.components.system.platform.system', return_value='Linux'), \
         patch('deviceid.components.system.platform.release', return_value='6.8.0-45-generic'):
        assert OsVersionComponent().produce() == 'Linux 6.8.0-45-generic'

    with patch('deviceid.components.system.platform.system', return_value='Darwin'), \
         patch('deviceid.components.system.platform.mac_ver', return_value=('14.5', '', '')):
        assert OsVersionComponent().produce() == 'Darwin 14.5'

    with patch('deviceid.components.system.platform.system', return_value='Windows'), \
         patch('deviceid.components.system.platform.version', return_value='10.0.22631'):
        assert OsVersionComponent().produce() == 'Windows 10.0.22631'

    with patch('deviceid.components.system.platform.system', return_value=''):
        assert OsVersionComponent().produce() is None
