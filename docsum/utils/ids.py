"""Id generation for transient files."""

import uuid


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. upload_<uuid>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_upload_id() -> str:
    """Generate a unique name stem for a staged upload."""
    return generate_uuid_prefix("upload")
