"""Service and business logic constants."""

# ============================================================================
# Upload Configuration
# ============================================================================

# Commit message used when the caller does not provide one
DEFAULT_COMMIT_MESSAGE = "upload file via API"

# Statuses the contents API returns for a successful create (201) or update (200)
UPLOAD_SUCCESS_STATUSES = (200, 201)

# ============================================================================
# Download Configuration
# ============================================================================

# Only a plain 200 counts as a successful read
DOWNLOAD_SUCCESS_STATUS = 200

# Chunk size used when streaming a direct download to disk (bytes)
DOWNLOAD_CHUNK_SIZE = 64 * 1024

__all__ = [
    'DEFAULT_COMMIT_MESSAGE',
    'UPLOAD_SUCCESS_STATUSES',
    'DOWNLOAD_SUCCESS_STATUS',
    'DOWNLOAD_CHUNK_SIZE',
]
