import pytest

from simple_gpio import SysFileSystem


def test_exists(tmp_path):
    fs = SysFileSystem()
    pin_dir = tmp_path / "gpio17"

    assert fs.exists(str(pin_dir)) is False
    pin_dir.mkdir()
    assert fs.exists(str(pin_dir)) is True


def test_write_then_read(tmp_path):
    fs = SysFileSystem()
    path = str(tmp_path / "value")

    fs.write(path, "1")

    assert fs.read(path) == "1"


def test_read_returns_raw_text(tmp_path):
    path = tmp_path / "direction"
    path.write_text("out\n")

    assert SysFileSystem().read(str(path)) == "out\n"


def test_write_overwrites(tmp_path):
    fs = SysFileSystem()
    path = str(tmp_path / "value")

    fs.write(path, "1")
    fs.write(path, "0")

    assert fs.read(path) == "0"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SysFileSystem().read(str(tmp_path / "missing"))


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        SysFileSystem().write(str(tmp_path / "gpio5" / "value"), "1")
