from pathlib import Path

MODEL_NAME = "gemini-2.0-flash"
PORT = 3000

STATIC_ROOT = Path("./web")
DIST_SUBDIR = Path("dist")
UPLOADS_SUBDIR = Path("public/uploads")
NEWS_SUBDIR = Path("public/news")
INDEX_FILE = "index.html"

UPLOAD_FIELD = "photos"
UPLOADS_URL_PREFIX = "/uploads/"
NEWS_URL_PREFIX = "/news/"

UPLOADS_CACHE_CONTROL = "public, max-age=31536000, immutable"
DIST_MAX_AGE = 3600  # 1h

IMAGE_DESCRIPTION_PROMPT = "Describe this image in detail."
# Declared for every image, whatever its real format
IMAGE_DESCRIPTION_MIME_TYPE = "image/jpeg"
