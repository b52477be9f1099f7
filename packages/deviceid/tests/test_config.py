import os
from unittest.mock import patch

from deviceid.config import Config


def test_config_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = Config()
    assert config.DEVICEID_COMMAND_TIMEOUT == 10
    assert config.DEVICEID_SHELL == 'bash'
    assert config.DEVICEID_SYSFS_NET_ROOT == '/sys/class/net'
    assert config.DEVICEID_LOG_LEVEL == 'WARNING'


def test_config_from_env():
    envs = {
        'DEVICEID_COMMAND_TIMEOUT': '3',
        'DEVICEID_SHELL': 'sh',
        'DEVICEID_SYSFS_NET_ROOT': '/tmp/net',
        'DEVICEID_LOG_LEVEL': 'DEBUG',
    }
    with patch.dict(os.environ, envs, clear=True):
        config = Config()
    assert config.DEVICEID_COMMAND_TIMEOUT == 3
    assert config.DEVICEID_SHELL == 'sh'
    assert config.DEVICEID_SYSFS_NET_ROOT == '/tmp/net'
    assert config.DEVICEID_LOG_LEVEL == 'DEBUG'


def test_config_invalid_timeout():
    for value in ['abc', '', '1.5']:
        with patch.dict(os.environ, {'DEVICEID_COMMAND_TIMEOUT': value}, clear=True):
            config = Config()
        assert config.DEVICEID_COMMAND_TIMEOUT == 10, f'{value!r} failed'
