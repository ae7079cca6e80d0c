from __future__ import annotations

import io
import zipfile

from fastapi.testclient import TestClient

from faviconkit.api.main import create_app


def _client() -> TestClient:
    return TestClient(create_app())


def test_health() -> None:
    response = _client().get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True, "service": "faviconkit"}


def test_generate_response_format(sample_png) -> None:
    response = _client().post(
        "/api/generate",
        files={"image": ("logo.png", sample_png, "image/png")},
        data={"options": '{"preset": "nextjs-app-router"}'},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert response.headers["content-disposition"] == 'attachment; filename="faviconkit.zip"'
    assert int(response.headers["content-length"]) == len(response.content)

    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        assert "app/manifest.ts" in zf.namelist()


def test_generate_without_options_uses_classic(sample_png) -> None:
    response = _client().post("/api/generate", files={"image": ("logo.png", sample_png, "image/png")})
    assert response.status_code == 200
    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        assert "public/site.webmanifest" in zf.namelist()


def test_missing_image() -> None:
    response = _client().post("/api/generate", data={"options": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "details": "No image file provided."}


def test_bad_options(sample_png) -> None:
    response = _client().post(
        "/api/generate",
        files={"image": ("logo.png", sample_png, "image/png")},
        data={"options": '{"paddingPct": "oops"}'},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "VALIDATION_ERROR", "details": "paddingPct must be a number."}


def test_file_too_large() -> None:
    raw = b"\x89PNG\r\n\x1a\n" + b"\0" * (10 * 1024 * 1024)
    response = _client().post("/api/generate", files={"image": ("big.png", raw, "image/png")})
    assert response.status_code == 413
    assert response.json() == {"error": "FILE_TOO_LARGE"}


def test_unsupported_type() -> None:
    response = _client().post("/api/generate", files={"image": ("anim.gif", b"GIF89a", "image/gif")})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


def test_corrupt_image_is_opaque_500() -> None:
    response = _client().post("/api/generate", files={"image": ("x.png", b"not a png", "image/png")})
    assert response.status_code == 500
    assert response.json() == {"error": "INTERNAL_ERROR"}
