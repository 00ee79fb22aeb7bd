import os

from ..utils.image_utils import build_public_url


def list_gallery_images(upload_dir) -> list[str]:
    """
    Lists the public URL of every entry in the upload directory, in the order
    the filesystem returns them.
    """
    return [build_public_url(filename) for filename in os.listdir(upload_dir)]


def delete_gallery_image(upload_dir, filename: str):
    """
    Removes an uploaded image.
    Arguments:
        upload_dir (Path): Upload directory.
        filename (str): Stored file name, joined as given.
    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: On any other removal failure.
    """
    os.remove(os.path.join(upload_dir, filename))
