import os

import structlog
from flask import Flask
from flask_cors import CORS

from .config.env_config import AppConfig
from .config.llm_client import create_client
from .endpoints.describe import describe_bp
from .endpoints.gallery import gallery_bp
from .endpoints.image_upload import image_upload_bp
from .endpoints.static_files import static_files_bp

logger = structlog.get_logger()

def create_app(config: AppConfig = None, llm_client=None):
    """
    Builds the Flask app.
    Arguments:
        config (AppConfig): Settings. Read from the environment when omitted.
        llm_client (genai.Client): Gemini client. Built from `config` when omitted.
    Returns:
        app (Flask): Configured app.
    """
    if config is None:
        config = AppConfig.from_env()
    if llm_client is None:
        llm_client = create_client(config.gemini_api_key)

    # Static files are served by `static_files_bp` with their own cache policies
    app = Flask(__name__, static_folder=None)
    app.config['APP_CONFIG'] = config
    app.extensions['genai_client'] = llm_client
    CORS(app, resources={r"/api/*": {"origins": config.ui_url}})

    # Never emptied: the upload dir is the gallery
    os.makedirs(config.uploads_dir, exist_ok=True)

    # Register Blueprints
    app.register_blueprint(image_upload_bp)
    app.register_blueprint(gallery_bp)
    app.register_blueprint(describe_bp)
    app.register_blueprint(static_files_bp)

    logger.info("App created", static_root=str(config.static_root), model=config.model_name)
    return app
