"""Loading of dlib's pretrained landmark model."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .backend import import_dlib

DEFAULT_MODEL_PATH = Path("shape_predictor_68_face_landmarks.dat")
MODEL_DOWNLOAD_URL = "http://dlib.net/files/shape_predictor_68_face_landmarks.dat.bz2"


class ModelError(enum.Enum):
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class ModelLoadResult:
    """Either a loaded predictor or the reason it could not be loaded."""

    predictor: Optional[Any] = None
    error: Optional[ModelError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and self.predictor is not None


def _dlib_shape_predictor(path: str) -> Any:
    return import_dlib("load the landmark model").shape_predictor(path)


def load_shape_predictor(
    path: Union[str, Path] = DEFAULT_MODEL_PATH,
    loader: Optional[Callable[[str], Any]] = None,
) -> ModelLoadResult:
    """Load a 68-point shape predictor without raising on a bad model file."""
    model_path = Path(path)
    if not model_path.is_file():
        logging.debug("Landmark model not found at %s", model_path)
        return ModelLoadResult(
            error=ModelError.MISSING,
            message=f"Unable to open {model_path} for reading.",
        )

    loader = loader or _dlib_shape_predictor
    try:
        predictor = loader(str(model_path))
    except RuntimeError as exc:
        # dlib reports serialization failures as RuntimeError.
        logging.debug("Landmark model at %s failed to deserialize: %s", model_path, exc)
        return ModelLoadResult(error=ModelError.CORRUPT, message=str(exc))

    logging.info("Loaded landmark model from %s", model_path)
    return ModelLoadResult(predictor=predictor)


def model_help_text(result: ModelLoadResult) -> str:
    lines = [
        "You need dlib's default face landmarking model file to run this example.",
        "You can get it from the following URL: ",
        f"   {MODEL_DOWNLOAD_URL}",
        "",
        result.message,
    ]
    return "\n".join(lines)
