from io import BytesIO
from pathlib import Path
import re

import pytest

from studio.services.storage.local import LocalStorageError


def test_save_writes_file_and_returns_url(storage):
    url = storage.save(BytesIO(b"jpeg-bytes"), "Holiday.JPG")

    assert re.fullmatch(r"/uploads/images-\d+-\d+\.jpg", url)
    assert storage.exists(url)
    assert storage.path_for_url(url).read_bytes() == b"jpeg-bytes"


def test_generated_filenames_are_unique(storage):
    names = {storage.generate_filename("a.png") for _ in range(20)}

    assert len(names) == 20


def test_path_for_url_stays_in_upload_dir(storage):
    path = storage.path_for_url("/uploads/../../etc/passwd")

    assert path.parent == storage.upload_dir
    assert path.name == "passwd"


def test_delete_file(storage):
    url = storage.save(BytesIO(b"data"), "a.png")

    assert storage.delete_file(url) is True
    assert not storage.exists(url)
    # second delete finds nothing to remove
    assert storage.delete_file(url) is False


def test_delete_file_error(storage, mocker):
    url = storage.save(BytesIO(b"data"), "a.png")
    mocker.patch.object(Path, "unlink", side_effect=PermissionError("read-only"))

    with pytest.raises(LocalStorageError):
        storage.delete_file(url)


def test_delete_files_bulk_reports_failures(storage, mocker):
    kept = storage.save(BytesIO(b"1"), "a.png")
    removed = storage.save(BytesIO(b"2"), "b.png")
    original = storage.delete_file

    def flaky_delete(url):
        if url == kept:
            raise LocalStorageError("busy")
        return original(url)

    mocker.patch.object(storage, "delete_file", side_effect=flaky_delete)

    count, failed = storage.delete_files_bulk([kept, removed, "/uploads/missing.png"])

    assert count == 1
    assert failed == [kept]
    assert storage.exists(kept)
