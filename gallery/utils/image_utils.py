import os
import time
from pathlib import Path
from urllib.parse import unquote, urlparse

from werkzeug.security import safe_join

from ..config.constants import NEWS_URL_PREFIX, UPLOADS_URL_PREFIX


def generate_filename(field_name: str, original_filename: str, timestamp_ms: int = None) -> str:
    """
    Builds the stored name of an upload: `<field>-<timestamp-ms><ext>`.
    Arguments:
        field_name (str): Multipart field the file came in.
        original_filename (str): Client-side file name, only its extension is kept.
        timestamp_ms (int): Creation time in milliseconds. Defaults to now.
    Returns:
        filename (str): Generated file name.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    extension = os.path.splitext(original_filename or "")[1]
    return f"{field_name}-{timestamp_ms}{extension}"


def claim_free_file(upload_dir: Path, field_name: str, original_filename: str):
    """
    Creates an empty file under a generated name not yet present in `upload_dir`,
    moving the timestamp forward one millisecond at a time on collision.
    The name is claimed with an exclusive create, so concurrent uploads never
    share it.
    Returns:
        (filename, handle) (tuple[str, BinaryIO]): Claimed name and its open file.
    """
    timestamp_ms = int(time.time() * 1000)
    while True:
        filename = generate_filename(field_name, original_filename, timestamp_ms)
        try:
            return filename, open(Path(upload_dir) / filename, 'xb')
        except FileExistsError:
            timestamp_ms += 1


def build_public_url(filename: str) -> str:
    return f"{UPLOADS_URL_PREFIX}{filename}"


def resolve_image_path(image_url: str, uploads_dir: Path, news_dir: Path) -> Path:
    """
    Maps a public image URL (`/uploads/<name>` or `/news/<name>`, optionally
    absolute) to the file serving it.
    Arguments:
        image_url (str): URL as returned by the upload endpoint.
        uploads_dir (Path): Directory behind `/uploads/`.
        news_dir (Path): Directory behind `/news/`.
    Returns:
        path (Path): Local file path.
    Raises:
        ValueError: If the URL is not under a public image mount.
    """
    url_path = unquote(urlparse(image_url).path)
    mounts = {UPLOADS_URL_PREFIX: uploads_dir, NEWS_URL_PREFIX: news_dir}
    for prefix, directory in mounts.items():
        if url_path.startswith(prefix):
            # Same containment rule send_from_directory applies
            filepath = safe_join(str(directory), url_path[len(prefix):])
            if filepath and url_path[len(prefix):]:
                return Path(filepath)
    raise ValueError(f"Not a public image URL: {image_url}")
