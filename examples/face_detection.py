"""Box frontal faces in the images given on the command line.

    python examples/face_detection.py photo1.jpg photo2.png
"""

from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from face_examples.cli import detection_main  # noqa: E402


if __name__ == "__main__":
    sys.exit(detection_main())
