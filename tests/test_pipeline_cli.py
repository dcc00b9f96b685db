#!/usr/bin/env python
"""
CLI and Pipeline Tests

Tests for command-line parsing, per-room processing and the JSON report.
"""

import json
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from roomdims.cli import create_parser, validate_args, parse_args, main
from roomdims.constants import TraversalStatus
from roomdims.geometry.primitives import Point
from roomdims.pipeline import (
    PipelineConfig,
    RoomResult,
    PipelineResult,
    process_room,
    process_room_file,
    run_pipeline,
)


def make_raw_loop(coords):
    n = len(coords)
    return {
        "corners": [
            {
                "id": f"c{i}",
                "x": x,
                "y": y,
                "wallStarts": [{"id": f"w{i}"}],
                "wallEnds": [{"id": f"w{(i - 1) % n}"}],
            }
            for i, (x, y) in enumerate(coords)
        ],
        "walls": [{"id": f"w{i}"} for i in range(n)],
    }


RECTANGLE_RAW = make_raw_loop([(0, 0), (10, 0), (10, 5), (0, 5)])


def write_json(directory: str, name: str, data) -> str:
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        json.dump(data, f)
    return path


class TestProcessRoom:
    """Tests for single room processing."""

    def test_rectangle(self):
        result = process_room(RECTANGLE_RAW, "rect")
        assert result.name == "rect"
        assert result.status == TraversalStatus.CLOSED
        assert result.polygon == [Point(0, 0), Point(10, 0), Point(10, 5), Point(0, 5)]
        assert len(result.pairs) == 4
        assert result.summary.area == 50
        assert result.error is None
        assert result.warnings == []
        print("  [PASS] Rectangle room")

    def test_missing_corners_recorded(self):
        """Test that invalid input is recorded, not raised."""
        result = process_room({"walls": []}, "empty")
        assert result.error is not None
        assert result.polygon == []
        assert result.pairs == []
        print("  [PASS] Missing corners recorded")

    def test_malformed_wall_reference_recorded(self):
        """Test a wall reference without an id fails only its own room."""
        raw = {
            "corners": [{"id": "a", "x": 0, "y": 0, "wallStarts": [{"ref": "w"}], "wallEnds": []}],
            "walls": [],
        }
        result = process_room(raw, "bad")
        assert result.name == "bad"
        assert result.error is not None
        assert result.polygon == []
        print("  [PASS] Malformed wall reference recorded")

    def test_broken_chain_keeps_partial_polygon(self):
        raw = make_raw_loop([(0, 0), (10, 0), (10, 5), (0, 5)])
        raw["corners"][2]["wallStarts"] = [{"id": "ghost"}]
        result = process_room(raw, "broken")
        assert result.status == TraversalStatus.BROKEN_CHAIN
        assert len(result.polygon) == 3
        assert result.error is None
        assert any("ghost" in w for w in result.warnings)
        print("  [PASS] Broken chain partial polygon")

    def test_too_short_polygon_warns(self):
        raw = make_raw_loop([(0, 0), (10, 0), (10, 5), (0, 5)])
        raw["corners"][1]["wallStarts"] = []
        result = process_room(raw, "dead_end")
        assert result.status == TraversalStatus.DEAD_END
        assert result.pairs == []
        assert any("at least 3" in w for w in result.warnings)
        print("  [PASS] Dead end room")

    def test_to_dict_is_json_serializable(self):
        result = process_room(RECTANGLE_RAW, "rect")
        d = json.loads(json.dumps(result.to_dict()))
        assert d["name"] == "rect"
        assert d["status"] == TraversalStatus.CLOSED
        assert len(d["pairs"]) == 4
        assert d["polygon"][1] == {"x": 10.0, "y": 0.0}
        print("  [PASS] Room result serializes")


class TestProcessRoomFile:
    """Tests for file-based processing."""

    def test_name_from_file_stem(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_json(tmpdir, "simple.json", RECTANGLE_RAW)
            result = process_room_file(path)
        assert result.name == "simple"
        assert len(result.pairs) == 4
        print("  [PASS] Room named after file")

    def test_sample_rooms(self):
        """Test the bundled sample rooms all close and yield pairs."""
        data_dir = project_root / "data"
        for name, corner_count in [("simple", 4), ("t_shape", 8), ("triangle", 3)]:
            result = process_room_file(str(data_dir / f"{name}.json"))
            assert result.status == TraversalStatus.CLOSED, name
            assert len(result.polygon) == corner_count, name
            assert result.pairs, name
            assert all(p.length > 1e-6 and p.width > 1e-6 for p in result.pairs)
        print("  [PASS] Sample rooms")

    def test_missing_file(self):
        result = process_room_file("/nonexistent/room.json")
        assert result.name == "room"
        assert result.error is not None
        print("  [PASS] Missing file recorded")

    def test_non_utf8_file_recorded(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "latin.json")
            with open(path, "wb") as f:
                f.write(b'{"corners": "\xff\xfe"}')
            result = process_room_file(path)
        assert result.name == "latin"
        assert result.error is not None
        print("  [PASS] Non-UTF-8 file recorded")


class TestCLI:
    """Tests for argument parsing and the entry point."""

    def test_parser_defaults(self):
        parser = create_parser()
        args = parser.parse_args(["-i", "a.json", "b.json"])
        assert args.input == ["a.json", "b.json"]
        assert args.output is None
        assert args.indent == 2
        assert args.verbose is False
        print("  [PASS] Parser defaults")

    def test_validate_missing_input(self):
        args = create_parser().parse_args(["-i", "/nonexistent/x.json"])
        is_valid, message = validate_args(args)
        assert not is_valid
        assert "not found" in message
        print("  [PASS] Missing input rejected")

    def test_validate_wrong_suffix(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "room.txt")
            Path(path).write_text("{}")
            args = create_parser().parse_args(["-i", path])
            is_valid, message = validate_args(args)
        assert not is_valid
        assert "JSON" in message
        print("  [PASS] Wrong suffix rejected")

    def test_parse_args_exits_on_invalid(self):
        with pytest.raises(SystemExit):
            parse_args(["-i", "/nonexistent/x.json"])
        print("  [PASS] parse_args exits")

    def test_main_writes_report(self):
        """Test the full run from files to a JSON report."""
        with tempfile.TemporaryDirectory() as tmpdir:
            good = write_json(tmpdir, "simple.json", RECTANGLE_RAW)
            bad = write_json(tmpdir, "empty.json", {"corners": [], "walls": []})
            output = os.path.join(tmpdir, "out", "report.json")

            main(["-i", good, bad, "-o", output])

            with open(output) as f:
                report = json.load(f)

        assert report["total_rooms"] == 2
        assert report["failed_rooms"] == 1
        names = [room["name"] for room in report["rooms"]]
        assert names == ["simple", "empty"]
        assert len(report["rooms"][0]["pairs"]) == 4
        print("  [PASS] Main writes report")

    def test_main_survives_undecodable_file(self):
        """Test one non-UTF-8 file does not abort the batch."""
        with tempfile.TemporaryDirectory() as tmpdir:
            good = write_json(tmpdir, "simple.json", RECTANGLE_RAW)
            latin = os.path.join(tmpdir, "latin.json")
            with open(latin, "wb") as f:
                f.write(b'{"corners": "\xff\xfe"}')
            output = os.path.join(tmpdir, "report.json")

            main(["-i", good, latin, "-o", output])

            with open(output) as f:
                report = json.load(f)

        assert report["total_rooms"] == 2
        assert report["failed_rooms"] == 1
        assert report["rooms"][1]["error"]
        print("  [PASS] Undecodable file recorded in report")

    def test_run_pipeline_returns_result(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            good = write_json(tmpdir, "simple.json", RECTANGLE_RAW)
            output = os.path.join(tmpdir, "report.json")
            args = parse_args(["-i", good, "-o", output])
            result = run_pipeline(args)
        assert isinstance(result, PipelineResult)
        assert result.output_path == output
        assert len(result.rooms) == 1
        assert result.failed_rooms == []
        print("  [PASS] run_pipeline result")

    def test_pipeline_config_defaults(self):
        config = PipelineConfig(inputs=["a.json"])
        assert config.output is None
        assert config.indent == 2
        assert RoomResult(name="x").status == TraversalStatus.INVALID_INPUT
        print("  [PASS] Config defaults")
