from pydantic import BaseModel

from domain.enums.resize_mode import ResizeMode

# Nombres de parámetros reconocidos en la query string
RESIZE_PARAM_NAMES = ("w", "h", "autorotate", "quality", "format", "mode")

DEFAULT_QUALITY = 100


class ResizeParams(BaseModel):
    has_params: bool = False
    w: int = 0  # 0 = eje sin especificar
    h: int = 0
    autorotate: bool = False  # Se parsea pero no se aplica
    quality: int = DEFAULT_QUALITY
    format: str = ""  # Ej: "png", "jpg"
    mode: ResizeMode = ResizeMode.MAX

    @property
    def is_eligible(self) -> bool:
        """True si hay parámetros y al menos un eje con tamaño."""
        return self.has_params and not (self.w == 0 and self.h == 0)

    def __str__(self):
        return (
            f"w: {self.w}, "
            f"h: {self.h}, "
            f"autorotate: {self.autorotate}, "
            f"quality: {self.quality}, "
            f"format: {self.format}, "
            f"mode: {self.mode.value}"
        )
