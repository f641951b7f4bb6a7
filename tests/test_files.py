from maakit.files import read_file


def test_read_file_returns_content(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256))
    target.write_bytes(payload)
    assert read_file(target) == payload


def test_read_file_large_content(tmp_path):
    target = tmp_path / "big.bin"
    payload = b"\x01\x02\x03" * 5000
    target.write_bytes(payload)
    assert read_file(str(target)) == payload


def test_read_file_empty(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert read_file(target) == b""


def test_read_file_missing_gives_empty(tmp_path):
    assert read_file(tmp_path / "missing.bin") == b""


def test_read_file_directory_gives_empty(tmp_path):
    assert read_file(tmp_path) == b""