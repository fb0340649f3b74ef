"""
FastAPI service for imageformat

Exposes the formatting pipeline as an HTTP API: upload an image plus a JSON
options document, get back the paths of the stored results.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from pydantic import BaseModel

from imageformat.api import save_outputs
from imageformat.config import ServiceConfig
from imageformat.image.formats import FormatDetector
from imageformat.image.io import open_image
from imageformat.models.options import parse_options
from imageformat.pipeline import derive_name, process_image
from imageformat.validation.image_validator import ImageValidator
from imageformat.version import __version__

logger = logging.getLogger(__name__)

ORIGINAL_SUFFIX = "-original"


class FormatResponse(BaseModel):
    """Paths of the files produced for one upload"""
    formatted: Optional[str] = None
    original: Optional[str] = None
    thumbnails: Optional[List[str]] = None


class ErrorResponse(BaseModel):
    """Error response"""
    detail: str


def prepare_root(root: Path) -> Path:
    """Create the storage directory; a regular file in its place is an error."""
    if root.exists() and not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    root.mkdir(parents=True, exist_ok=True)
    return root


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Service configuration (None = read from environment)

    Returns:
        Configured FastAPI app
    """
    config = config or ServiceConfig.from_env()
    root = prepare_root(Path(config.root))
    logger.info(f"Root dir: {root}")

    app = FastAPI(
        title="imageformat API",
        description="Rotate, crop and resize images and generate thumbnails",
        version=__version__,
    )

    @app.get("/")
    def root_endpoint():
        """API root - health check"""
        return {
            "service": "imageformat API",
            "version": __version__,
            "status": "healthy"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "healthy"}

    @app.post(
        "/format",
        response_model=FormatResponse,
        response_model_exclude_none=True,
        responses={400: {"model": ErrorResponse}},
    )
    async def format_image_endpoint(
        image: UploadFile = File(..., description="Image file to format"),
        name: Optional[str] = Form(None, description="Output file name. Defaults to the upload's filename."),
        options: Optional[str] = Form(None, description="Options JSON document. Defaults to {}."),
    ):
        """
        Format an uploaded image.

        The upload is stored as <name>-original.<ext>, then rotated,
        cropped and resized into <name>, and one file per requested
        thumbnail is written next to it.

        Raises:
            HTTPException 400: If the upload, the options or any processing
                step fails. No partial thumbnail set is returned.
            HTTPException 422: If no image was uploaded

        Example:
            curl -X POST http://localhost:8080/format \\
              -F "image=@photo.jpg" \\
              -F "name=photo.jpg" \\
              -F 'options={"resize": {"width": 800}, "thumbnails": [{"suffix": "-small", "width": 150}]}'
        """
        logger.info(f"Options: {options}")

        try:
            if image.size is not None and image.size > config.max_upload_bytes:
                raise HTTPException(
                    status_code=400,
                    detail=f"Upload too large: {image.size} bytes (max {config.max_upload_bytes})"
                )
            image_bytes = await image.read()
            if len(image_bytes) > config.max_upload_bytes:
                raise HTTPException(
                    status_code=400,
                    detail=f"Upload too large: {len(image_bytes)} bytes (max {config.max_upload_bytes})"
                )

            # Only a bare file name is accepted, never a path into or out of root
            output_name = Path(name or image.filename or "").name
            if not output_name:
                raise HTTPException(status_code=400, detail="An output name is required")
            if not FormatDetector.is_supported(output_name):
                raise HTTPException(
                    status_code=400,
                    detail=f"Unsupported output format: {output_name}"
                )

            logger.info("Reading options...")
            parsed = parse_options(options)

            is_valid, error = ImageValidator.validate_bytes(image_bytes)
            if not is_valid:
                raise HTTPException(status_code=400, detail=error)

            original_path = root / derive_name(output_name, ORIGINAL_SUFFIX)
            logger.info(f"Saving original: {original_path}")
            original_path.write_bytes(image_bytes)

            logger.info("Opening original...")
            src_img = open_image(original_path)

            logger.info("Processing...")
            results = process_image(output_name, src_img, parsed)
            for result in results:
                if Path(result.name).name != result.name:
                    raise HTTPException(
                        status_code=400,
                        detail=f"Output name escapes the storage root: {result.name}"
                    )
            paths = save_outputs(results, root)

        except HTTPException:
            raise
        except Exception as e:
            logger.warning(f"Format request failed: {e}")
            raise HTTPException(status_code=400, detail=str(e))

        return FormatResponse(
            formatted=paths[0].as_posix(),
            original=original_path.as_posix(),
            thumbnails=[p.as_posix() for p in paths[1:]] or None,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    config = ServiceConfig.from_env()
    uvicorn.run(app, host=config.host, port=config.port)
