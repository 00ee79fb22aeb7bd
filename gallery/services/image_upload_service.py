import os
import structlog

from ..utils.image_utils import build_public_url, claim_free_file

logger = structlog.get_logger()

def save_uploaded_images(files, upload_dir, field_name) -> list[str]:
    """
    Stores uploaded files under generated names. All or nothing: when one file
    fails, the files already written for this batch are removed.
    Arguments:
        files (list[FileStorage]): Files in the order they were received.
        upload_dir (Path): Destination directory.
        field_name (str): Multipart field the files came in, used as name prefix.
    Returns:
        image_urls (list[str]): Public URL of each stored file, same order as `files`.
    """
    os.makedirs(upload_dir, exist_ok=True)
    image_urls = []
    written_paths = []
    try:
        for file in files:
            filename, handle = claim_free_file(upload_dir, field_name, file.filename)
            written_paths.append(os.path.join(upload_dir, filename))
            with handle:
                file.save(handle)
            logger.info("Stored upload", original=file.filename, filename=filename)
            image_urls.append(build_public_url(filename))
    except Exception:
        for filepath in written_paths:
            try:
                os.remove(filepath)
            except FileNotFoundError:
                pass
        logger.warning("Upload batch rolled back", removed=len(written_paths))
        raise
    return image_urls
