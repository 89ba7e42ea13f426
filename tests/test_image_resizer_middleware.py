import io
import os

from fastapi.testclient import TestClient
from PIL import Image

from core.config import Settings
from middleware.image_resizer import ImageResizerMiddleware
from services.image_processing_service import ImageProcessingService


def _open(response):
    return Image.open(io.BytesIO(response.content))


def test_resizes_with_max_mode(client):
    response = client.get("/img/wide.png?w=100&h=100&mode=max")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    with _open(response) as image:
        assert image.size == (100, 50)
        assert image.format == "PNG"


def test_single_axis_request(client):
    response = client.get("/img/wide.png?w=50")
    with _open(response) as image:
        assert image.size == (50, 25)


def test_stretch_mode_uses_exact_box(client):
    response = client.get("/img/wide.png?w=60&h=60&mode=stretch")
    with _open(response) as image:
        assert image.size == (60, 60)


def test_jpeg_output_keeps_literal_content_type(client):
    response = client.get("/img/wide.png?w=100&h=100&quality=50&format=jpg")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpg"
    with _open(response) as image:
        assert image.format == "JPEG"


def test_format_defaults_to_path_extension(client):
    response = client.get("/img/UPPER.PNG?w=10&h=10")
    assert response.headers["content-type"] == "image/PNG"


def test_no_query_serves_original_file(client, web_root):
    response = client.get("/img/photo.jpg")
    assert response.status_code == 200
    assert response.content == (web_root / "img" / "photo.jpg").read_bytes()


def test_unknown_query_serves_original_file(client, web_root):
    response = client.get("/img/wide.png?v=2")
    assert response.content == (web_root / "img" / "wide.png").read_bytes()


def test_zero_size_serves_original_file(client, web_root):
    response = client.get("/img/wide.png?quality=10")
    assert response.content == (web_root / "img" / "wide.png").read_bytes()


def test_non_image_path_is_untouched(client):
    response = client.get("/notes.txt?w=10&h=10")
    assert response.status_code == 200
    assert response.text == "plain text"


def test_missing_file_falls_through_without_decoding(client, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("decode should not be attempted")

    monkeypatch.setattr(ImageProcessingService, "process_file", fail)
    response = client.get("/img/missing.png?w=10&h=10")
    assert response.status_code == 404


def test_path_outside_web_root_is_not_resolved(web_root):
    middleware = ImageResizerMiddleware(app=None, web_root=str(web_root))
    assert middleware.resolve_file_path("/../secret.png") is None
    assert middleware.resolve_file_path("/img/wide.png") == os.path.realpath(web_root / "img" / "wide.png")


def test_corrupt_image_is_a_server_error(web_root):
    from main import create_app

    app = create_app(Settings(WEB_ROOT_PATH=str(web_root)))
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/img/broken.png?w=10&h=10")
    assert response.status_code == 500


def test_resize_is_logged(client, caplog):
    with caplog.at_level("INFO", logger="middleware.image_resizer"):
        client.get("/img/wide.png?w=100&h=100")
    assert "Resizing /img/wide.png with params w: 100, h: 100" in caplog.text


def test_symlink_leaving_web_root_is_not_resolved(web_root):
    outside = web_root.parent / "private.png"
    outside.write_bytes((web_root / "img" / "wide.png").read_bytes())
    os.symlink(outside, web_root / "img" / "link.png")

    middleware = ImageResizerMiddleware(app=None, web_root=str(web_root))
    assert middleware.resolve_file_path("/img/link.png") is None


def test_oversized_request_serves_original_file(client, web_root):
    response = client.get("/img/wide.png?w=100000&h=100000&mode=pad")
    assert response.status_code == 200
    assert response.content == (web_root / "img" / "wide.png").read_bytes()
