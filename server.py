import structlog

from gallery import create_app
from gallery.config.env_config import AppConfig

logger = structlog.get_logger()

# Fails fast when GEMINI_API_KEY is missing
config = AppConfig.from_env()
app = create_app(config)

if __name__ == '__main__':
    logger.info(f"Server is running on http://localhost:{config.port}")
    app.run(port=config.port)
