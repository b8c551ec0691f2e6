"""Webcam facial landmarks with a live FPS readout. Press escape to quit.

Needs shape_predictor_68_face_landmarks.dat in the working directory
(http://dlib.net/files/shape_predictor_68_face_landmarks.dat.bz2).
"""

from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from face_examples.cli import pose_main  # noqa: E402


if __name__ == "__main__":
    sys.exit(pose_main())
