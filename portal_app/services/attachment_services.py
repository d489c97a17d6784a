"""
Attachment metadata rows plus the stored objects they point at.

A row and its object are written as a pair: upload first and remove the
object again if the row cannot be inserted; on delete the row removal is only
committed once the object is gone.
"""
import logging
import time
import uuid
from pathlib import PurePath
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from constants.catalog_constants import MediaType, MEDIA_TYPE_BY_EXTENSION, ATTACHMENT_ITEM_TYPES
from models.catalog_models import Attachment
from schemas.catalog_schemas import AttachmentInput
from utils.db_transaction import transactional
from utils.storage import StorageError


logger = logging.getLogger(__name__)


def file_extension(file_name: str) -> str:
    return PurePath(file_name).suffix.lstrip(".").lower()

def media_type_for(file_name: str) -> MediaType:
    return MEDIA_TYPE_BY_EXTENSION.get(file_extension(file_name), MediaType.DOCUMENT)

def default_title(file_name: str) -> str:
    return PurePath(file_name).stem

def _owner_column(item_type: str) -> str:
    if item_type not in ATTACHMENT_ITEM_TYPES:
        raise ValueError(f"Unknown attachment owner type: {item_type}")
    return f"{item_type}_id"

def build_storage_path(item_type: str, item_id, file_name: str) -> str:
    """``{item_type}s/{item_id}/{random}_{millis}.{ext}``"""
    _owner_column(item_type)
    ext = file_extension(file_name)
    generated = f"{uuid.uuid4().hex[:13]}_{int(time.time() * 1000)}"
    if ext:
        generated = f"{generated}.{ext}"
    return f"{item_type}s/{item_id}/{generated}"

def get_attachments(db: Session, item_type: str, item_id) -> list[Attachment]:
    column = getattr(Attachment, _owner_column(item_type))
    stmt = (
        select(Attachment)
        .where(column == item_id)
        .order_by(Attachment.sort_order, Attachment.created_at)
    )
    return db.execute(stmt).scalars().all()

@transactional
def _insert_attachment(db: Session, data: AttachmentInput, file_path: str, file_size: int) -> Attachment:
    attachment = Attachment(
        file_name=data.file_name,
        file_path=file_path,
        file_size=file_size,
        media_type=media_type_for(data.file_name),
        title=data.title or default_title(data.file_name),
        description=data.description,
        content_type=data.content_type,
        is_featured=data.is_featured,
        sort_order=data.sort_order,
    )
    setattr(attachment, _owner_column(data.item_type), data.item_id)
    db.add(attachment)
    db.commit()
    return attachment

def upload_attachment(db: Session, storage, data: AttachmentInput, content: bytes) -> Attachment:
    file_path = build_storage_path(data.item_type, data.item_id, data.file_name)
    storage.upload(file_path, content, data.content_type)

    try:
        return _insert_attachment(db, data, file_path, len(content))
    except Exception:
        logger.warning(f"Attachment row insert failed; removing uploaded object {file_path}")
        try:
            storage.remove(file_path)
        except StorageError:
            logger.error(f"Could not remove orphaned object {file_path}", exc_info=True)
        raise

@transactional
def delete_attachment(db: Session, storage, attachment_id) -> None:
    attachment = db.get(Attachment, attachment_id)
    if attachment is None:
        return
    file_path = attachment.file_path
    db.delete(attachment)
    db.flush()
    storage.remove(file_path)
    db.commit()

def attachment_url(storage, attachment: Attachment) -> Optional[str]:
    if not attachment.file_path:
        return None
    return storage.public_url(attachment.file_path)
