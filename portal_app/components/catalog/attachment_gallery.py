import logging
import streamlit as st
from constants.catalog_constants import MediaType, MEDIA_ICONS
from db.orm_session import get_session
from schemas.catalog_schemas import AttachmentInput
from services.attachment_services import (
    get_attachments, upload_attachment, delete_attachment, attachment_url, default_title
)
from utils.formatters import format_with_unit
from utils.storage import get_storage


logger = logging.getLogger(__name__)

UPLOAD_TYPES = ["jpg", "jpeg", "png", "gif", "webp", "svg", "pdf", "mp4", "webm", "ogg", "doc", "docx", "txt"]


def _render_preview(attachment, url: str):
    if attachment.media_type == MediaType.IMAGE:
        st.image(url, caption=attachment.title, use_container_width=True)
    elif attachment.media_type == MediaType.VIDEO:
        st.video(url)
    else:
        st.markdown(f"{MEDIA_ICONS[attachment.media_type]} [{attachment.title or attachment.file_name}]({url})")

def _upload(item_type: str, item_id, files) -> int:
    storage = get_storage()
    uploaded = 0
    for file in files:
        data = AttachmentInput(
            item_type=item_type,
            item_id=item_id,
            file_name=file.name,
            content_type=file.type,
            title=default_title(file.name),
        )
        try:
            with get_session() as db:
                upload_attachment(db, storage, data, file.getvalue())
            uploaded += 1
        except Exception:
            logger.exception(f"Attachment upload failed for {file.name}")
            st.error(f"Failed to upload {file.name}.")
    return uploaded

def _delete(attachment_id) -> bool:
    try:
        with get_session() as db:
            delete_attachment(db, get_storage(), attachment_id)
        return True
    except Exception:
        logger.exception("Attachment delete failed")
        st.error("Failed to delete attachment.")
        return False

def render_attachment_gallery(item_type: str, item_id):
    """Media for one product, service or bundle, with upload and delete."""
    key = f"{item_type}_{item_id}"

    with st.form(f"upload_form_{key}", clear_on_submit=True):
        files = st.file_uploader(
            "Add images, videos or documents",
            type=UPLOAD_TYPES,
            accept_multiple_files=True,
            key=f"uploader_{key}",
        )
        submitted = st.form_submit_button("Upload")

    if submitted and files:
        count = _upload(item_type, item_id, files)
        if count:
            st.success(f"Uploaded {count} file(s).")

    with get_session() as db:
        attachments = get_attachments(db, item_type, item_id)

    if not attachments:
        st.caption("No media attached yet.")
        return

    storage = get_storage()
    cols = st.columns(3)
    for i, attachment in enumerate(attachments):
        with cols[i % 3]:
            _render_preview(attachment, attachment_url(storage, attachment))
            if attachment.file_size:
                st.caption(format_with_unit(round(attachment.file_size / 1024), "KB"))
            if st.button("Remove", key=f"remove_attachment_{attachment.id}"):
                if _delete(attachment.id):
                    st.rerun()
