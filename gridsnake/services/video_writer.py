"""
Video output for rendered sessions.

Frames from PillowRenderer.snapshot() are converted with numpy and encoded
with MoviePy: MP4 (libx264) by default, GIF when the path ends in .gif.
"""

import logging
from pathlib import Path
from typing import List

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_FPS = 10  # one frame per tick at the default 100 ms interval


def write_video(frames: List[Image.Image], output_path: str, fps: int = DEFAULT_FPS) -> str:
    """
    Encode frames to a video file.

    Args:
        frames: PIL images, all the same size
        output_path: destination; the extension picks the format
        fps: playback frames per second

    Returns:
        The output path as a string.
    """
    if not frames:
        raise ValueError("No frames to write.")

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Encoding {len(frames)} frames to {path} at {fps} fps")
    clip = ImageSequenceClip([np.array(frame.convert("RGB")) for frame in frames], fps=fps)
    try:
        if path.suffix.lower() == ".gif":
            clip.write_gif(str(path), fps=fps, logger=None)
        else:
            clip.write_videofile(
                str(path),
                codec='libx264',
                audio=False,
                logger=None
            )
    finally:
        clip.close()

    logger.info(f"Video created successfully at {path}")
    return str(path)
