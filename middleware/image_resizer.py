import logging
import os
from typing import Optional

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware

from services.image_processing_service import ImageProcessingService
from services.resize_request_classifier import ResizeRequestClassifier

logger = logging.getLogger(__name__)


class ImageResizerMiddleware(BaseHTTPMiddleware):
    """Redimensiona imágenes estáticas cuando la URL trae parámetros de resize.

    Si la petición no aplica o el archivo no existe, se delega al siguiente
    handler (normalmente StaticFiles) sin tocar nada.
    """

    def __init__(self, app, web_root: str):
        super().__init__(app)
        self.web_root = os.path.realpath(web_root)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        resize_params = ResizeRequestClassifier.classify(path, request.query_params)
        if not resize_params.is_eligible:
            return await call_next(request)

        logger.info(f"Resizing {path} with params {resize_params}")

        file_path = self.resolve_file_path(path)
        if file_path is None or not await run_in_threadpool(os.path.isfile, file_path):
            return await call_next(request)

        # Decodificar y codificar fuera del event loop
        result = await run_in_threadpool(
            ImageProcessingService.process_file, file_path, resize_params
        )
        if result is None:
            return await call_next(request)

        image_bytes, content_type = result
        return Response(content=image_bytes, media_type=content_type)

    def resolve_file_path(self, path: str) -> Optional[str]:
        """Une la ruta de la petición con el web root; None si se sale de él.

        Los symlinks se resuelven antes de comparar.
        """
        file_path = os.path.realpath(os.path.join(self.web_root, path.lstrip("/")))
        if os.path.commonpath([self.web_root, file_path]) != self.web_root:
            return None
        return file_path


def add_image_resizer(app: FastAPI, web_root: str):
    """Registra el middleware de redimensionado en la aplicación."""
    app.add_middleware(ImageResizerMiddleware, web_root=web_root)
