import os

from flask import Blueprint, abort, current_app, send_from_directory
from werkzeug.security import safe_join

from ..config.constants import DIST_MAX_AGE, INDEX_FILE, UPLOADS_CACHE_CONTROL

static_files_bp = Blueprint('static_files', __name__)

@static_files_bp.route('/uploads/<path:filename>', methods=['GET'])
def serve_upload(filename):
    config = current_app.config['APP_CONFIG']
    response = send_from_directory(config.uploads_dir.resolve(), filename)
    response.headers['Cache-Control'] = UPLOADS_CACHE_CONTROL
    return response

@static_files_bp.route('/news/<path:filename>', methods=['GET'])
def serve_news(filename):
    config = current_app.config['APP_CONFIG']
    return send_from_directory(config.news_dir.resolve(), filename)

@static_files_bp.route('/', defaults={'path': ''}, methods=['GET'])
@static_files_bp.route('/<path:path>', methods=['GET'])
def serve_app(path):
    """
    Serves a file of the web app bundle, or the app's entry document for any
    other path so client-side routes survive a reload.
    """
    dist_dir = current_app.config['APP_CONFIG'].dist_dir.resolve()
    filepath = safe_join(str(dist_dir), path) if path else None
    if filepath and os.path.isfile(filepath):
        return send_from_directory(dist_dir, path, max_age=DIST_MAX_AGE)
    return send_from_directory(dist_dir, INDEX_FILE)

@static_files_bp.route('/', defaults={'path': ''}, methods=['POST', 'PUT', 'PATCH', 'DELETE'])
@static_files_bp.route('/<path:path>', methods=['POST', 'PUT', 'PATCH', 'DELETE'])
def unmatched_route(path):
    """
    Any other method on a path with no handler is not found, not 405.
    """
    abort(404)
