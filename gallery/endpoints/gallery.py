import structlog
from flask import Blueprint, current_app, jsonify

from ..services.gallery_service import delete_gallery_image, list_gallery_images

logger = structlog.get_logger()
gallery_bp = Blueprint('gallery', __name__)

@gallery_bp.route('/api/gallery', methods=['GET'])
def get_gallery():
    try:
        config = current_app.config['APP_CONFIG']
        return jsonify(list_gallery_images(config.uploads_dir))
    except Exception:
        logger.exception("Error reading gallery:\n")
        return jsonify({'error': 'Failed to fetch gallery images.'}), 500

@gallery_bp.route('/api/gallery/<filename>', methods=['DELETE'])
def delete_image(filename):
    try:
        config = current_app.config['APP_CONFIG']
        delete_gallery_image(config.uploads_dir, filename)
        logger.info("Deleted image", filename=filename)
        return jsonify({'message': 'Image deleted successfully.'}), 200
    except FileNotFoundError:
        logger.warning("Image to delete not found", filename=filename)
        return jsonify({'error': 'Image not found.'}), 404
    except Exception:
        logger.exception("Error deleting image:\n")
        return jsonify({'error': 'Failed to delete image.'}), 500
