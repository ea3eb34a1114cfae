from __future__ import annotations

import fire

from leafpop.cli import Commands


def test_size_command(make_image) -> None:
    path = make_image(size=(32, 16))
    assert fire.Fire(Commands, command=["size", str(path)]) == "32x16"


def test_image_command_one_line_per_popup(make_image, capsys) -> None:
    path = make_image()
    output = fire.Fire(
        Commands, command=["image", str(path), "https://example.com/a.png", "--embed"]
    )
    lines = output.splitlines()
    assert len(lines) == 2
    assert "base64," in lines[0]
    assert "https://example.com/a.png" in lines[1]
    assert capsys.readouterr().out.strip() == output
