import os
import tempfile
import uuid
from pathlib import Path

from deviceid.components.files import FileContentsComponent, FileTokenComponent


def test_file_contents_first_readable_path():
    with tempfile.TemporaryDirectory() as temp_dir:
        machine_id = Path(temp_dir) / 'machine-id'
        machine_id.write_text('0123456789abcdef\n')
        component = FileContentsComponent([Path(temp_dir) / 'missing', machine_id])
        assert component.produce() == '0123456789abcdef'


def test_file_contents_empty_file_falls_through():
    with tempfile.TemporaryDirectory() as temp_dir:
        empty = Path(temp_dir) / 'empty'
        empty.write_text('\n')
        other = Path(temp_dir) / 'other'
        other.write_text('value')
        assert FileContentsComponent([empty, other]).produce() == 'value'
        assert FileContentsComponent(empty).produce() is None


def test_file_contents_skip_lines():
    """去掉 /proc/cpuinfo 中会变化的行"""
    cpuinfo_a = 'processor\t: 0\nmodel name\t: Intel\ncpu MHz\t\t: 800.000\nbogomips\t: 4800.00\n'
    cpuinfo_b = 'processor\t: 0\nmodel name\t: Intel\ncpu MHz\t\t: 3400.120\nbogomips\t: 4800.00\n'
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / 'cpuinfo'
        component = FileContentsComponent(path, skip_line_prefixes=('cpu MHz', 'bogomips'))
        path.write_text(cpuinfo_a)
        first = component.produce()
        path.write_text(cpuinfo_b)
        second = component.produce()
    assert first == second == 'processor\t: 0\nmodel name\t: Intel'


def test_file_contents_missing():
    assert FileContentsComponent('/nonexistent/file').produce() is None
    assert FileContentsComponent([]).produce() is None


def test_file_token_created_once():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, 'sub', 'token')
        component = FileTokenComponent(path)
        token = component.produce()
        assert token is not None
        uuid.UUID(token)
        assert Path(path).read_text() == token
        assert component.produce() == token
        assert FileTokenComponent(path).produce() == token


def test_file_token_existing():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / 'token'
        path.write_text('issued-token\n')
        assert FileTokenComponent(path).produce() == 'issued-token'


def test_file_token_unwritable():
    with tempfile.TemporaryDirectory() as temp_dir:
        blocker = Path(temp_dir) / 'blocker'
        blocker.write_text('a file, not a directory')
        # parent of the token path is a regular file
        assert FileTokenComponent(blocker / 'token').produce() is None


def test_file_token_not_utf8():
    """令牌文件被写入了非 UTF-8 内容时不抛异常"""
    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / 'token'
        path.write_bytes(b'\xff\xfe')
        component = FileTokenComponent(path)
        assert component.produce() == '\ufffd\ufffd'
        assert component.produce() == component.produce()
