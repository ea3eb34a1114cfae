from __future__ import annotations

from pathlib import Path

import pytest

from leafpop import (
    ImageMetadataError,
    ImageNotFoundError,
    popup_image,
    popup_local_image,
    popup_remote_image,
    resolve_source,
)

URL = "https://www.r-project.org/logo/Rlogo.png"


def test_local_embedded(make_image) -> None:
    html = popup_local_image(make_image(), embed=True)
    assert "<img width=300 height=225 src='data:image/png;base64," in html
    assert "max-height" not in html


def test_local_linked_copies_file(make_image, tmp_path: Path) -> None:
    path = make_image("cat.png")
    out = tmp_path / "site"
    html = popup_local_image(path, width=100, graphs_dir=out)
    assert "<image src='../graphs/cat.png' width=100 height=75>" in html
    assert (out / "graphs" / "cat.png").exists()


def test_local_height_only(make_image, tmp_path: Path) -> None:
    path = make_image("wide.png", size=(400, 200))
    html = popup_local_image(path, height=50, graphs_dir=tmp_path)
    assert "width=100 height=50>" in html


def test_local_missing(tmp_path: Path) -> None:
    with pytest.raises(ImageNotFoundError):
        popup_local_image(tmp_path / "missing.png")


def test_remote_defaults() -> None:
    html = popup_remote_image(URL)
    assert f"<image src='{URL}' width=300 height=100%>" in html
    assert "max-height: 2000px;" in html


def test_resolve_source(make_image) -> None:
    assert resolve_source(make_image()) == "local"
    assert resolve_source(URL) == "remote"


def test_popup_image_single_value(make_image) -> None:
    popups = popup_image(str(make_image()), embed=True)
    assert len(popups) == 1
    assert "base64," in popups[0]


def test_popup_image_mixed_keeps_order(make_image, tmp_path: Path) -> None:
    path = make_image()
    popups = popup_image([URL, path], graphs_dir=tmp_path)
    assert len(popups) == 2
    assert URL in popups[0]
    assert "../graphs/photo.png" in popups[1]


def test_popup_image_forwards_size_to_remote() -> None:
    (html,) = popup_image(URL, width=120)
    assert "width=120 height=100%>" in html


def test_popup_image_forced_remote(make_image) -> None:
    path = make_image()
    (html,) = popup_image(path, src="remote")
    assert f"<image src='{path}'" in html


def test_popup_image_forced_local_missing() -> None:
    with pytest.raises(ImageNotFoundError):
        popup_image(URL, src="local")


def test_popup_image_bad_src() -> None:
    with pytest.raises(ValueError):
        popup_image(URL, src="somewhere")


def test_local_both_sizes_used_as_is(make_image, tmp_path: Path) -> None:
    html = popup_local_image(make_image(), width=50, height=400, graphs_dir=tmp_path)
    assert "width=50 height=400>" in html


def test_popup_image_forced_local(make_image, tmp_path: Path) -> None:
    (html,) = popup_image(make_image("cat.png"), src="local", graphs_dir=tmp_path)
    assert "<image src='../graphs/cat.png' width=300 height=225>" in html


def test_popup_image_embedded_jpeg(make_image) -> None:
    (html,) = popup_image(make_image("photo.jpg"), embed=True)
    assert "src='data:image/jpeg;base64," in html


def test_popup_image_unreadable_local_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"not really a png")
    with pytest.raises(ImageMetadataError):
        popup_image(path)


def test_popup_image_file_already_in_graphs(make_image, tmp_path: Path) -> None:
    site = tmp_path / "site"
    (first,) = popup_image(make_image("cat.png"), graphs_dir=site)
    (again,) = popup_image(site / "graphs" / "cat.png", graphs_dir=site)
    assert again == first
