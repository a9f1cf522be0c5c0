"""
tests.api.test_assets

Purpose:
    Static asset routes return file bytes untouched.
"""

from __future__ import annotations

from helloworld.api.settings import DEFAULT_STATIC_DIR


def test_style_css_bytes_match_packaged_file(client) -> None:
    r = client.get("/style.css")
    assert r.status_code == 200
    assert r.content == (DEFAULT_STATIC_DIR / "style.css").read_bytes()
    assert r.headers["content-type"].startswith("text/css")


def test_background_jpg_bytes_match_packaged_file(client) -> None:
    r = client.get("/background.jpg")
    assert r.status_code == 200
    assert r.content == (DEFAULT_STATIC_DIR / "background.jpg").read_bytes()
    assert r.headers["content-type"] == "image/jpeg"


def test_assets_served_from_configured_dir(client_factory, tmp_path) -> None:
    payload = bytes(range(256)) * 4
    (tmp_path / "background.jpg").write_bytes(payload)
    (tmp_path / "style.css").write_bytes(b"body { color: {{LEAD}}; }\n")

    client = client_factory(static_dir=tmp_path)

    assert client.get("/background.jpg").content == payload
    # No template substitution on assets.
    assert client.get("/style.css").content == b"body { color: {{LEAD}}; }\n"


def test_missing_asset_is_404(client_factory, tmp_path) -> None:
    r = client_factory(static_dir=tmp_path).get("/style.css")
    assert r.status_code == 404


def test_only_declared_assets_are_exposed(client) -> None:
    assert client.get("/index.html").status_code == 404
