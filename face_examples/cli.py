"""Command-line entry points for the face detection and face pose examples.

``face-detection IMAGE...`` shows each image with its detected faces boxed
and waits for enter between images. ``face-pose`` overlays 68-point
landmarks and an FPS counter on the default webcam; press escape to exit.

Both commands exit with status 0, including after a reported failure.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import cv2

from .annotator import BatchConfig, run_batch
from .models import DEFAULT_MODEL_PATH, load_shape_predictor, model_help_text
from .overlay import LiveConfig, run
from .vision import FaceDetector, LandmarkPredictor

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
USAGE_TEXT = "Provide image paths as command line arguments to this program."
CAMERA_UNAVAILABLE_TEXT = "Unable to connect to the camera."


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or a positive integer, got {value}")
    return number


def setup_logging(level: str) -> None:
    """Configure root logger output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging verbosity for diagnostics",
    )


def parse_detection_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Box frontal faces found in still images.")
    parser.add_argument("images", nargs="*", help="Image files to process in order")
    parser.add_argument(
        "--upsample",
        type=non_negative_int,
        default=1,
        help="Times to double the grayscale image before detection (finds smaller faces)",
    )
    _add_log_level(parser)
    return parser.parse_args(argv)


def parse_pose_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Live 68-point facial landmarks over the webcam feed.")
    parser.add_argument(
        "--model",
        type=Path,
        default=DEFAULT_MODEL_PATH,
        help="Path to shape_predictor_68_face_landmarks.dat",
    )
    parser.add_argument("--camera", type=int, default=0, help="Camera device index")
    parser.add_argument(
        "--detection-ratio",
        type=positive_int,
        default=2,
        help="Run face detection once every N frames",
    )
    parser.add_argument(
        "--downsample-ratio",
        type=positive_int,
        default=2,
        help="Shrink frames by this factor before processing",
    )
    _add_log_level(parser)
    return parser.parse_args(argv)


def detection_main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_detection_args(argv)
    setup_logging(args.log_level)

    if not args.images:
        print(USAGE_TEXT)
        return 0

    config = BatchConfig(upsample_levels=args.upsample)
    try:
        detector = FaceDetector()
        run_batch(args.images, detector, config)
    except Exception as exc:  # noqa: BLE001
        logging.debug("Batch aborted", exc_info=True)
        print("\nexception thrown!")
        print(exc)
    finally:
        cv2.destroyAllWindows()
    return 0


def pose_main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_pose_args(argv)
    setup_logging(args.log_level)

    config = LiveConfig(
        detection_ratio=args.detection_ratio,
        downsample_ratio=args.downsample_ratio,
    )
    capture = cv2.VideoCapture(args.camera)
    try:
        if not capture.isOpened():
            print(CAMERA_UNAVAILABLE_TEXT)
            return 0

        detector = FaceDetector()
        model = load_shape_predictor(args.model)
        if not model.ok:
            logging.info("Landmark model unavailable (%s): %s", model.error.value, model.message)
            print(model_help_text(model))
            return 0

        frames = run(capture, detector, LandmarkPredictor(model.predictor), config)
        logging.info("Processed %d frames", frames)
    except Exception as exc:  # noqa: BLE001
        logging.debug("Live overlay stopped", exc_info=True)
        print(exc)
    finally:
        capture.release()
        cv2.destroyAllWindows()
    return 0
