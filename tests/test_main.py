"""End-to-end tests for the command-line entry point."""

import json
import logging
from pathlib import Path

import pytest
from PIL import Image

from chess_render.board.colors import color_of
from chess_render.config import RenderConfig
from chess_render.errors import InvalidNotationError
from chess_render.main import build_parser, collect_placements, main, parse_place_arg

from conftest import cell_color


def _run(*argv: str) -> None:
    main(list(argv))


class TestParsePlaceArg:
    def test_prefixed(self) -> None:
        assert str(parse_place_arg("b:na1")) == "bn@a1"

    def test_pawn(self) -> None:
        assert str(parse_place_arg("w:e4")) == "wp@e4"

    def test_missing_separator(self) -> None:
        with pytest.raises(InvalidNotationError, match="'wna1'"):
            parse_place_arg("wna1")


class TestCollectPlacements:
    def test_defaults_when_nothing_given(self) -> None:
        args = build_parser().parse_args([])
        placements = collect_placements(args, RenderConfig())
        assert [str(p) for p in placements] == ["bn@a1"]

    def test_empty_flag(self) -> None:
        args = build_parser().parse_args(["--empty"])
        assert collect_placements(args, RenderConfig()) == []

    def test_empty_fen_draws_nothing(self) -> None:
        args = build_parser().parse_args(["--fen", "8/8/8/8/8/8/8/8"])
        assert collect_placements(args, RenderConfig()) == []

    def test_empty_placements_file_draws_nothing(self, tmp_path: Path) -> None:
        path = tmp_path / "p.json"
        path.write_text("[]", encoding="utf-8")
        args = build_parser().parse_args(["--placements-file", str(path)])
        assert collect_placements(args, RenderConfig()) == []

    def test_source_order(self, tmp_path: Path) -> None:
        path = tmp_path / "p.json"
        path.write_text(json.dumps([{"color": "w", "square": "d4"}]), encoding="utf-8")
        args = build_parser().parse_args([
            "--place", "b:ke8",
            "--placements-file", str(path),
            "--fen", "8/8/8/8/8/8/8/N7",
        ])
        placements = collect_placements(args, RenderConfig())
        assert [str(p) for p in placements] == ["wn@a1", "wp@d4", "bk@e8"]


class TestMain:
    def test_default_run(self, sheet_path: Path, tmp_path: Path) -> None:
        out = tmp_path / "image.png"
        _run("--sheet", str(sheet_path), "--output", str(out))
        with Image.open(out) as img:
            rgba = img.convert("RGBA")
        assert rgba.size == (640, 640)
        assert rgba.getpixel((40, 600)) == cell_color(3, 0)

    def test_empty_board_needs_no_sheet(self, tmp_path: Path) -> None:
        out = tmp_path / "empty.png"
        _run("--empty", "--sheet", str(tmp_path / "missing.png"), "--output", str(out))
        with Image.open(out) as img:
            rgba = img.convert("RGBA")
        for i in range(64):
            file, row = divmod(i, 8)
            assert rgba.getpixel((file * 80 + 40, row * 80 + 40)) == color_of(i)

    def test_custom_size(self, sheet_path: Path, tmp_path: Path) -> None:
        out = tmp_path / "big.png"
        _run("--sheet", str(sheet_path), "--output", str(out),
             "--size", "800", "--place", "w:ke1")
        with Image.open(out) as img:
            assert img.size == (800, 800)

    def test_invalid_piece_exits_nonzero(
        self, sheet_path: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture,
    ) -> None:
        out = tmp_path / "image.png"
        with caplog.at_level(logging.ERROR, logger="chess_render"):
            with pytest.raises(SystemExit) as exc_info:
                _run("--sheet", str(sheet_path), "--output", str(out), "--place", "w:za1")
        assert exc_info.value.code == 1
        assert "'z'" in caplog.text
        assert not out.exists()

    def test_missing_sheet_exits_nonzero(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run("--sheet", str(tmp_path / "missing.png"),
                 "--output", str(tmp_path / "image.png"))
        assert exc_info.value.code == 1

    def test_unreadable_placements_file_exits_nonzero(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run("--placements-file", str(tmp_path),
                 "--output", str(tmp_path / "image.png"))
        assert exc_info.value.code == 1

    def test_bad_canvas_size_exits_nonzero(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _run("--size", "641", "--output", str(tmp_path / "image.png"))
        assert exc_info.value.code == 1
