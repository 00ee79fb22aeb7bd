from io import BytesIO
import pytest
from unittest.mock import MagicMock

from gallery import create_app
from gallery.config.env_config import AppConfig


@pytest.fixture
def config(tmp_path):
    static_root = tmp_path / "web"
    (static_root / "dist").mkdir(parents=True)
    (static_root / "public" / "news").mkdir(parents=True)
    (static_root / "dist" / "index.html").write_text("<html>app</html>")
    (static_root / "dist" / "main.js").write_text("console.log('app');")
    return AppConfig(gemini_api_key="test-key", static_root=static_root)


@pytest.fixture
def llm_client():
    """
    Stands in for `genai.Client`.
    """
    return MagicMock()


@pytest.fixture
def app(config, llm_client):
    app = create_app(config, llm_client=llm_client)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upload(client):
    """
    Posts files as `photos` and returns the response.
    """
    def _upload(*files):
        data = {"photos": [(BytesIO(content), name) for name, content in files]}
        return client.post("/api/upload", data=data, content_type="multipart/form-data")
    return _upload
