import pytest

from bsdkit.md5 import MD5Context, md5_data, md5_file, md5_file_chunk

CASES = [
    ("d41d8cd98f00b204e9800998ecf8427e", ""),
    ("900150983cd24fb0d6963f7d28e17f72", "abc"),
    ("827ccb0eea8a706c4c34a16891f84e7b", "12345"),
]


@pytest.mark.parametrize("digest, text", CASES)
def test_md5_data(digest, text):
    assert md5_data(text.encode()) == digest


@pytest.mark.parametrize("digest, text", CASES)
def test_md5_data_accepts_str(digest, text):
    assert md5_data(text) == digest


def test_incremental_matches_one_shot():
    context = MD5Context()
    context.update(b"1")
    context.update(b"23")
    context.update(b"45")
    assert context.hexdigest() == "827ccb0eea8a706c4c34a16891f84e7b"
    assert context.digest().hex() == context.hexdigest()
    assert len(context.digest()) == 16


def test_file(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"abc")
    assert md5_file(path) == "900150983cd24fb0d6963f7d28e17f72"


def test_file_chunk(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"xx12345yy")
    assert md5_file_chunk(path, 2, 5) == "827ccb0eea8a706c4c34a16891f84e7b"


def test_file_chunk_zero_length_reads_to_end(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"zzabc")
    assert md5_file_chunk(path, 2, 0) == "900150983cd24fb0d6963f7d28e17f72"


def test_file_chunk_past_end(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"abc")
    assert md5_file_chunk(path, 0, 1000) == md5_data(b"abc")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        md5_file(tmp_path / "absent")


def test_negative_offset(tmp_path):
    path = tmp_path / "data"
    path.write_bytes(b"abc")
    with pytest.raises(ValueError):
        md5_file_chunk(path, -1, 0)