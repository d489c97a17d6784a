from enum import Enum


class PricingType(str, Enum):
    ITEMIZED = "itemized"
    FLAT_RATE = "flat_rate"


class MediaType(str, Enum):
    IMAGE = "image"
    PDF = "pdf"
    DOCUMENT = "document"
    VIDEO = "video"


MEDIA_TYPE_BY_EXTENSION = {
    **{ext: MediaType.IMAGE for ext in ("jpg", "jpeg", "png", "gif", "webp", "svg")},
    "pdf": MediaType.PDF,
    **{ext: MediaType.VIDEO for ext in ("mp4", "webm", "ogg")},
}

MEDIA_ICONS = {
    MediaType.IMAGE: "🖼️",
    MediaType.PDF: "📕",
    MediaType.VIDEO: "🎞️",
    MediaType.DOCUMENT: "📄",
}

# Attachment owners; also the prefix of the storage path ("products/<id>/...")
ATTACHMENT_ITEM_TYPES = ("product", "service", "bundle", "category")

PRICING_LABELS = {
    PricingType.ITEMIZED: "Itemized Pricing (total of all items with optional discount)",
    PricingType.FLAT_RATE: "Flat Rate Pricing (set a fixed price regardless of included items)",
}

CATEGORY_INDENT = "-- "
