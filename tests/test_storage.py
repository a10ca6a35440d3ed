import pytest

from portfolio_api.core.errors import ValidationError
from portfolio_api.services.upload_service import LocalStorage, check_document, check_image


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "files"), max_size=16)


def test_unique_name_keeps_stem_and_extension(storage):
    name = storage.unique_name("../../etc/Report Final.PDF")

    stem, millis, rest = name.split("-", 2)
    assert stem == "Report_Final"
    assert millis.isdigit()
    assert rest.endswith(".PDF")


def test_names_do_not_collide(storage):
    assert storage.unique_name("a.png") != storage.unique_name("a.png")


@pytest.mark.parametrize("filename", ["", "..", "../x", "a/b", "..\\x"])
def test_resolve_rejects_paths(storage, filename):
    with pytest.raises(ValidationError):
        storage.delete(filename)


def test_delete_missing_file_is_not_an_error(storage):
    storage.delete("never-existed.txt")


def test_save_enforces_size(storage):
    with pytest.raises(ValidationError):
        storage.save_bytes(b"x" * 17, original_name="big.bin")


def test_type_checks():
    check_image("a.svg", "image/svg+xml")
    check_document("a.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document")
    with pytest.raises(ValidationError):
        check_image("a.exe", "image/png")
    with pytest.raises(ValidationError):
        check_document("a.pdf", "image/png")
