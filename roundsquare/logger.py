"""Markdown logger for field events (shape spawned, shape removed)."""

import datetime

from .shapes import Shape


class ShapeLogger:
    """Handles logging of shape events to a markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the shape logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Round/Square Field Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Shape Events\n\n")
                f.write("| Timestamp | Event | Shape | Center (x,y) | Details |\n")
                f.write("|-----------|-------|-------|--------------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def log_spawn(self, shape: Shape) -> None:
        """
        Log a shape created by a click on the field.

        Parameters
        ----------
        shape : Shape
            The freshly bound and rendered shape
        """
        self._write_row("SPAWN", shape, f"size {shape.size}, color {shape.color}, z {shape.node.z_index if shape.node else '-'}")

    def log_remove(self, shape: Shape) -> None:
        """Log a shape removed by a click on it."""
        self._write_row("REMOVE", shape, "")

    def _write_row(self, event: str, shape: Shape, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            center = shape.center
            position = f"({center.x}, {center.y})" if center is not None else "-"

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {type(shape).__name__} | {position} | {details} |\n")

        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")
