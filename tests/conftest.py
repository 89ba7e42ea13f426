import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from core.config import Settings


def make_image_bytes(size, image_format="PNG", mode="RGB", color=(200, 30, 30)):
    """Build an in-memory image of the given size and format."""
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture
def web_root(tmp_path):
    """Sandboxed web root holding a few fixture images."""
    root = tmp_path / "wwwroot"
    (root / "img").mkdir(parents=True)
    (root / "img" / "wide.png").write_bytes(make_image_bytes((200, 100)))
    (root / "img" / "photo.jpg").write_bytes(make_image_bytes((400, 300), "JPEG"))
    (root / "img" / "UPPER.PNG").write_bytes(make_image_bytes((50, 50)))
    (root / "img" / "broken.png").write_bytes(b"this is not an image")
    (root / "notes.txt").write_text("plain text")
    return root


@pytest.fixture
def client(web_root):
    from main import create_app

    app = create_app(Settings(WEB_ROOT_PATH=str(web_root)))
    return TestClient(app)
