import structlog
from flask import Blueprint, current_app, jsonify, request

from ..services.describe_service import describe_image

logger = structlog.get_logger()
describe_bp = Blueprint('describe', __name__)

@describe_bp.route('/api/describe-image', methods=['POST'])
def describe_image_endpoint():
    try:
        data = request.get_json(silent=True) or {}
        image_url = data.get('imageUrl') if isinstance(data, dict) else None
        if not image_url:
            return jsonify({'error': 'Image URL is required'}), 400

        description = describe_image(
            current_app.extensions['genai_client'],
            current_app.config['APP_CONFIG'],
            image_url,
        )

        return jsonify({'description': description})
    except Exception:
        logger.exception("Error describing image:\n")
        return jsonify({'error': 'Failed to describe image'}), 500
