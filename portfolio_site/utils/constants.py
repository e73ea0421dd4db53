from enum import Enum


class ContactMessages(Enum):
    """User-facing messages shown by the contact form."""
    BACKEND_NOT_READY = "Layanan backend belum siap. Coba lagi."
    MISSING_FIELDS = "Semua kolom wajib diisi."
    SEND_FAILED = "Gagal mengirim pesan. Silakan coba lagi nanti."
    GENERIC_ERROR = "Terjadi kesalahan. Silakan coba lagi."
    SENT = "Pesan berhasil dikirim. Terima kasih!"


class ButtonLabels(Enum):
    """Submit button labels for each visible form state."""
    CONNECTING = "Menghubungkan..."
    SENDING = "Mengirim..."
    SENT = "Terkirim!"
    SEND = "Kirim Pesan"


# Logical location of the tenant-partitioned message collection
CONTACT_COLLECTION_PATH = "artifacts/{app_id}/public/data/contact_messages"


def contact_collection_path(app_id: str) -> str:
    """Return the logical collection path for a tenant's contact messages."""
    return CONTACT_COLLECTION_PATH.format(app_id=app_id)
