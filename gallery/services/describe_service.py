import structlog
from google.genai import types

from ..config.constants import IMAGE_DESCRIPTION_MIME_TYPE, IMAGE_DESCRIPTION_PROMPT
from ..utils.image_utils import resolve_image_path

logger = structlog.get_logger()

def read_image_bytes(image_url: str, uploads_dir, news_dir) -> bytes:
    """
    Reads the file behind a public image URL.
    Arguments:
        image_url (str): `/uploads/<name>` style URL.
        uploads_dir (Path): Directory behind `/uploads/`.
        news_dir (Path): Directory behind `/news/`.
    Returns:
        data (bytes): Raw file content.
    """
    image_path = resolve_image_path(image_url, uploads_dir, news_dir)
    with open(image_path, 'rb') as f:
        return f.read()

def get_image_description(client, model_name: str, image_bytes: bytes) -> str:
    """
    Asks the vision model for a detailed description of an image.
    Arguments:
        client (genai.Client): Gemini client.
        model_name (str): Model to call.
        image_bytes (bytes): Image content, sent inline.
    Returns:
        response.text (str): Generated description.
    Raises:
        ValueError: If the model returned no text.
    """
    image_part = types.Part.from_bytes(data=image_bytes, mime_type=IMAGE_DESCRIPTION_MIME_TYPE)
    response = client.models.generate_content(
        model=model_name,
        contents=[IMAGE_DESCRIPTION_PROMPT, image_part],
    )
    if not response.text:
        raise ValueError("Model returned an empty description")
    return response.text

def describe_image(client, config, image_url: str) -> str:
    """
    Handles the image lookup and description generation.
    """
    image_bytes = read_image_bytes(image_url, config.uploads_dir, config.news_dir)
    logger.info("Describing image", image_url=image_url, size=len(image_bytes))
    return get_image_description(client, config.model_name, image_bytes)
