import uuid

import pytest

from constants.catalog_constants import MediaType
from schemas.catalog_schemas import AttachmentInput
from services.attachment_services import (
    attachment_url,
    build_storage_path,
    delete_attachment,
    get_attachments,
    media_type_for,
    upload_attachment,
)


def _input(item_id, file_name="Pump Manual.PDF", **kwargs):
    return AttachmentInput(item_type="product", item_id=item_id, file_name=file_name, content_type="application/pdf", **kwargs)


def test_storage_path_layout():
    item_id = uuid.uuid4()

    path = build_storage_path("product", item_id, "Photo.JPG")

    assert path.startswith(f"products/{item_id}/")
    assert path.endswith(".jpg")
    assert build_storage_path("product", item_id, "Photo.JPG") != path


def test_unknown_owner_type_rejected():
    with pytest.raises(ValueError):
        build_storage_path("widget", uuid.uuid4(), "a.png")


@pytest.mark.parametrize("file_name, expected", [
    ("pool.png", MediaType.IMAGE),
    ("manual.pdf", MediaType.PDF),
    ("walkthrough.mp4", MediaType.VIDEO),
    ("warranty.docx", MediaType.DOCUMENT),
    ("README", MediaType.DOCUMENT),
])
def test_media_type_from_extension(file_name, expected):
    assert media_type_for(file_name) == expected


def test_upload_stores_object_and_row(db, storage, make_product):
    product = make_product()

    attachment = upload_attachment(db, storage, _input(product.id), b"%PDF-1.7")

    assert attachment.product_id == product.id
    assert attachment.title == "Pump Manual"
    assert attachment.media_type == MediaType.PDF
    assert attachment.file_size == 8
    assert storage.objects == {attachment.file_path: b"%PDF-1.7"}
    assert attachment_url(storage, attachment).endswith(attachment.file_path)
    assert [a.id for a in get_attachments(db, "product", product.id)] == [attachment.id]


def test_failed_insert_removes_uploaded_object(db, storage):
    missing_product = uuid.uuid4()

    with pytest.raises(RuntimeError):
        upload_attachment(db, storage, _input(missing_product), b"data")

    assert storage.objects == {}
    assert len(storage.removed) == 1
    assert get_attachments(db, "product", missing_product) == []


def test_delete_removes_row_and_object(db, storage, make_product):
    product = make_product()
    attachment = upload_attachment(db, storage, _input(product.id, title="Manual"), b"data")

    delete_attachment(db, storage, attachment.id)

    assert storage.removed == [attachment.file_path]
    assert get_attachments(db, "product", product.id) == []


def test_delete_keeps_row_when_object_removal_fails(db, failing_storage, make_product):
    product = make_product()
    storage = failing_storage
    attachment = upload_attachment(db, storage, _input(product.id), b"data")

    with pytest.raises(RuntimeError):
        delete_attachment(db, storage, attachment.id)

    assert [a.id for a in get_attachments(db, "product", product.id)] == [attachment.id]
