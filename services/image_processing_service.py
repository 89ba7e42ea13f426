from fractions import Fraction
from math import floor
from typing import Optional, Tuple
import io
import logging

from PIL import Image, UnidentifiedImageError

from domain.enums.resize_mode import ResizeMode
from domain.schemas.resize_schema import ResizeParams

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (255, 255, 255)

JPEG_FORMATS = ("jpg", "jpeg")


class ImageProcessingService:

    @staticmethod
    def process_file(file_path: str, params: ResizeParams) -> Optional[Tuple[bytes, str]]:
        """Decodifica el archivo, lo redimensiona y devuelve (bytes, content-type).

        Devuelve None, sin decodificar, si el tamaño final supera el límite de píxeles.
        """
        try:
            with Image.open(file_path) as original:
                new_size = ImageProcessingService.compute_dimensions(original.size, params)
                if ImageProcessingService.exceeds_pixel_limit(new_size):
                    logger.warning(f"Tamaño {new_size} demasiado grande para {file_path}")
                    return None
                original.load()
                return ImageProcessingService.resize(original, params)
        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"Error decodificando {file_path}: {str(e)}")
            raise

    @staticmethod
    def exceeds_pixel_limit(size: Tuple[int, int]) -> bool:
        limit = Image.MAX_IMAGE_PIXELS
        return limit is not None and size[0] * size[1] > limit

    @staticmethod
    def resize(original: Image.Image, params: ResizeParams) -> Tuple[bytes, str]:
        with ImageProcessingService.resize_image(original, params) as resized:
            image_bytes = ImageProcessingService.encode_image(resized, params)
        return image_bytes, ImageProcessingService.get_content_type(params)

    @staticmethod
    def compute_dimensions(original_size: Tuple[int, int], params: ResizeParams) -> Tuple[int, int]:
        """Calcula el tamaño final según el modo.

        En modo max la imagen se escala de forma uniforme para caber en la
        caja w x h. Si solo viene un eje, el otro se deriva proporcionalmente.
        Los demás modos usan w x h tal cual.
        """
        if params.mode != ResizeMode.MAX:
            return params.w, params.h

        original_width, original_height = original_size
        ratios = []
        if params.w:
            ratios.append(Fraction(params.w, original_width))
        if params.h:
            ratios.append(Fraction(params.h, original_height))
        if not ratios:
            raise ValueError("Se necesita al menos un eje para redimensionar")

        ratio = min(ratios)
        width = max(1, floor(original_width * ratio))
        height = max(1, floor(original_height * ratio))
        return width, height

    @staticmethod
    def resize_image(original: Image.Image, params: ResizeParams) -> Image.Image:
        new_size = ImageProcessingService.compute_dimensions(original.size, params)

        # Canvas blanco y la imagen original dibujada ocupando todo el rectángulo
        canvas = Image.new('RGB', new_size, BACKGROUND_COLOR)
        with original.convert('RGBA') as rgba:
            with rgba.resize(new_size, Image.LANCZOS) as scaled:
                canvas.paste(scaled, (0, 0), mask=scaled)
        return canvas

    @staticmethod
    def encode_image(image: Image.Image, params: ResizeParams) -> bytes:
        img_byte_arr = io.BytesIO()
        if params.format.lower() in JPEG_FORMATS:
            quality = min(max(params.quality, 1), 100)
            image.save(img_byte_arr, format='JPEG', quality=quality)
        else:
            # PNG para "png" y cualquier formato desconocido; quality no aplica
            image.save(img_byte_arr, format='PNG')
        return img_byte_arr.getvalue()

    @staticmethod
    def get_content_type(params: ResizeParams) -> str:
        return f"image/{params.format}"
