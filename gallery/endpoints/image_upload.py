import structlog
from flask import Blueprint, current_app, jsonify, request

from ..config.constants import UPLOAD_FIELD
from ..services.image_upload_service import save_uploaded_images

logger = structlog.get_logger()
image_upload_bp = Blueprint('image_upload', __name__)

@image_upload_bp.route('/api/upload', methods=['POST'])
def upload_images():
    try:
        # Browsers send an empty part when no file was picked
        files = [file for file in request.files.getlist(UPLOAD_FIELD) if file.filename]
        if not files:
            return jsonify({'error': 'No files uploaded.'}), 400

        config = current_app.config['APP_CONFIG']
        image_urls = save_uploaded_images(files, config.uploads_dir, UPLOAD_FIELD)

        return jsonify({'imageUrls': image_urls})
    except Exception:
        logger.exception("Error uploading images:\n")
        return jsonify({'error': 'Failed to upload images.'}), 500
