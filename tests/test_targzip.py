import io
import tarfile

import pytest

from k8up.targzip import TarGzipWriter

TEST_DATA = bytes([0x00, 0xFF] * 10)


class MockWriter:
    def __init__(self):
        self.buffer = bytearray()
        self.write_error = None

    def write(self, data):
        if self.write_error is not None:
            raise self.write_error
        self.buffer.extend(bytes(data))
        return len(data)

    def flush(self):
        pass

    def close(self):
        raise AssertionError("close must not be called")


def _header():
    info = tarfile.TarInfo("testName")
    info.size = len(TEST_DATA)
    return info


def test_new_writer_writes_nothing_yet():
    mock = MockWriter()
    TarGzipWriter(mock)
    assert len(mock.buffer) == 0


def test_write_header():
    mock = MockWriter()
    tgz = TarGzipWriter(mock)
    tgz.write_header(_header())
    assert len(mock.buffer) > 0


def test_write_header_error():
    mock = MockWriter()
    mock.write_error = OSError("test error")
    tgz = TarGzipWriter(mock)
    with pytest.raises(OSError, match="test error"):
        tgz.write_header(_header())


def test_write():
    mock = MockWriter()
    tgz = TarGzipWriter(mock)
    tgz.write_header(_header())
    len_after_header = len(mock.buffer)
    assert len_after_header > 0

    assert tgz.write(TEST_DATA) == len(TEST_DATA)
    tgz.close()
    assert len(mock.buffer) > len_after_header


def test_write_error():
    mock = MockWriter()
    tgz = TarGzipWriter(mock)
    tgz.write_header(_header())
    mock.write_error = OSError("test error")

    # Either the write or the flushing close must surface the error.
    with pytest.raises(OSError, match="test error"):
        tgz.write(TEST_DATA)
        tgz.close()


def test_close():
    tgz = TarGzipWriter(MockWriter())
    tgz.write_header(_header())
    assert tgz.write(TEST_DATA) == len(TEST_DATA)
    tgz.close()
    tgz.close()
    with pytest.raises(ValueError):
        tgz.write(TEST_DATA)
    with pytest.raises(ValueError):
        tgz.write_header(_header())


def test_round_trip_through_tarfile():
    out = io.BytesIO()
    with TarGzipWriter(out) as tgz:
        tgz.write_header(_header())
        tgz.write(TEST_DATA[:7])
        tgz.write(TEST_DATA[7:])
        second = tarfile.TarInfo("dir/other.txt")
        second.size = 5
        tgz.write_header(second)
        tgz.write(b"data\n")

    with tarfile.open(fileobj=io.BytesIO(out.getvalue()), mode="r:gz") as archive:
        members = archive.getmembers()
        assert [m.name for m in members] == ["testName", "dir/other.txt"]
        assert archive.extractfile(members[0]).read() == TEST_DATA
        assert archive.extractfile(members[1]).read() == b"data\n"


def test_write_too_long_raises():
    tgz = TarGzipWriter(io.BytesIO())
    tgz.write_header(_header())
    with pytest.raises(tarfile.TarError):
        tgz.write(TEST_DATA + b"x")


def test_close_with_missing_bytes_raises():
    out = io.BytesIO()
    tgz = TarGzipWriter(out)
    tgz.write_header(_header())
    tgz.write(TEST_DATA[:5])
    with pytest.raises(tarfile.TarError):
        tgz.close()