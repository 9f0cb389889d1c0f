"""
Frame sink for rendered screens.
Keeps the most recent frame in memory and optionally mirrors it to a PNG file.
"""

import io
import os
import logging
import threading
from typing import Optional

from PIL import Image


class DisplayDriver:
    """
    Receives full frames from the screens
    """

    def __init__(self, width: int = 800, height: int = 480, output_path: Optional[str] = None):
        """
        Initialize display driver

        Args:
            width: Display width in pixels
            height: Display height in pixels
            output_path: PNG file mirroring the current frame (None for memory only)
        """
        self.width = width
        self.height = height
        self.output_path = output_path or None
        self.logger = logging.getLogger(__name__)
        self.last_image: Optional[Image.Image] = None
        self.frame_count = 0
        self._lock = threading.Lock()

    def initialize(self):
        """Prepare the output location"""
        if self.output_path:
            directory = os.path.dirname(self.output_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            self.logger.info(f"Display mirrored to {self.output_path}")
        else:
            self.logger.info("Display initialized (memory only)")

    def display_image(self, image: Image.Image):
        """
        Show a frame

        Args:
            image: PIL Image produced by a screen
        """
        # A renderer producing the wrong size is a bug, but the frame is still shown
        if image.size != (self.width, self.height):
            self.logger.warning(f"UNEXPECTED RESIZE from {image.size} to ({self.width}, {self.height}) - check renderer!")
            image = image.resize((self.width, self.height), Image.Resampling.LANCZOS)

        if image.mode != 'RGB':
            image = image.convert('RGB')

        with self._lock:
            self.last_image = image
            self.frame_count += 1

        if self.output_path:
            try:
                image.save(self.output_path, format='PNG')
            except OSError as e:
                self.logger.error(f"Failed to write frame to {self.output_path}: {e}")

        self.logger.debug(f"Frame {self.frame_count} displayed")

    def get_png_bytes(self) -> Optional[bytes]:
        """Current frame encoded as PNG, or None before the first frame"""
        with self._lock:
            image = self.last_image
        if image is None:
            return None
        buffer = io.BytesIO()
        image.save(buffer, format='PNG')
        return buffer.getvalue()

    def cleanup(self):
        """Drop the current frame"""
        with self._lock:
            self.last_image = None
        self.logger.info("Display cleaned up")
