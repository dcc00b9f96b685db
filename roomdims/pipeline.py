"""
Pipeline Orchestration Module

Coordinates the workflow from room JSON files to a dimensions report.
"""

import json
import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_ROOM_NAME, TraversalStatus
from .boundary.corners import RoomDataError, load_room_file, parse_room_data
from .boundary.reconstructor import reconstruct
from .dimensions.pair_calculator import LengthWidthPair, compute_pairs
from .geometry.calculator import RoomSummary, summarize_polygon, validate_room_summary
from .geometry.primitives import Point

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for pipeline execution."""
    inputs: List[str]
    output: Optional[str] = None
    indent: int = 2
    verbose: bool = False


@dataclass
class RoomResult:
    """Result from processing a single room."""
    name: str
    polygon: List[Point] = field(default_factory=list)
    status: str = TraversalStatus.INVALID_INPUT
    pairs: List[LengthWidthPair] = field(default_factory=list)
    summary: RoomSummary = field(default_factory=RoomSummary)
    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert room result to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "status": self.status,
            "polygon": [p.to_dict() for p in self.polygon],
            "summary": self.summary.to_dict(),
            "pairs": [pair.to_dict() for pair in self.pairs],
            "warnings": self.warnings,
            "error": self.error,
        }


@dataclass
class PipelineResult:
    """Result from full pipeline execution."""
    rooms: List[RoomResult]
    output_path: Optional[str]
    processing_time: float

    @property
    def failed_rooms(self) -> List[RoomResult]:
        return [room for room in self.rooms if room.error]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rooms": [room.to_dict() for room in self.rooms],
            "total_rooms": len(self.rooms),
            "failed_rooms": len(self.failed_rooms),
            "processing_time": round(self.processing_time, 3),
        }


def process_room(raw: Any, room_name: str = DEFAULT_ROOM_NAME) -> RoomResult:
    """
    Reconstruct one room and compute its length/width pairs.

    Invalid room records are recorded on the result instead of raised, so
    one bad room does not abort a batch.

    Args:
        raw: Decoded room record with a corners list
        room_name: Room name for diagnostics

    Returns:
        RoomResult
    """
    result = RoomResult(name=room_name)

    try:
        corners = parse_room_data(raw, room_name)
    except RoomDataError as e:
        logger.warning(str(e))
        result.error = str(e)
        return result

    boundary = reconstruct(corners, room_name)
    result.polygon = boundary.points
    result.status = boundary.status
    if boundary.message:
        result.warnings.append(boundary.message)

    if not boundary.points:
        result.error = "Conversion failed"
        return result

    result.summary = summarize_polygon(boundary.points, room_name)
    result.warnings.extend(validate_room_summary(result.summary))

    result.pairs = compute_pairs(boundary.points)
    if not result.pairs and len(boundary.points) >= 3:
        message = f"No valid length/width pairs found for '{room_name}'"
        logger.warning(message)
        result.warnings.append(message)

    logger.info(
        f"Room '{room_name}': {len(boundary.points)} points, "
        f"{len(result.pairs)} pairs, status {boundary.status}"
    )

    return result


def process_room_file(filepath: str) -> RoomResult:
    """
    Load a room JSON file and process it. The room is named after the file.

    Args:
        filepath: Path to the room JSON file

    Returns:
        RoomResult (with error set if the file could not be loaded)
    """
    room_name = Path(filepath).stem

    try:
        raw = load_room_file(filepath)
    except RoomDataError as e:
        logger.warning(str(e))
        return RoomResult(name=room_name, error=str(e))

    return process_room(raw, room_name)


def write_report(result: PipelineResult, output: Optional[str], indent: int = 2) -> None:
    """
    Write the JSON report to a file, or stdout when output is None.
    """
    text = json.dumps(result.to_dict(), indent=indent)

    if output is None:
        sys.stdout.write(text + "\n")
        return

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Report written to {path}")


def run_pipeline(args) -> PipelineResult:
    """
    Run the full room dimensions pipeline.

    Args:
        args: Parsed command-line arguments

    Returns:
        PipelineResult with all rooms
    """
    start_time = time.time()

    config = PipelineConfig(
        inputs=list(args.input),
        output=args.output,
        indent=args.indent,
        verbose=args.verbose,
    )

    # Setup logging
    log_level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(message)s', stream=sys.stderr)

    logger.info(f"Processing {len(config.inputs)} room file(s)")

    rooms = [process_room_file(path) for path in config.inputs]

    result = PipelineResult(
        rooms=rooms,
        output_path=config.output,
        processing_time=time.time() - start_time,
    )

    if result.failed_rooms:
        logger.warning(
            f"{len(result.failed_rooms)} of {len(rooms)} rooms could not be loaded or converted"
        )

    write_report(result, config.output, config.indent)

    return result
