from enum import Enum


class ResizeMode(Enum):
    """
    Modos de redimensionado aceptados en el parámetro `mode`.
    - MAX: escala uniforme, la imagen cabe en la caja pedida.
    - PAD, CROP, STRETCH: se aceptan como nombres válidos pero hoy
      dibujan la imagen directamente en la caja w x h, sin relleno
      ni recorte.
    """

    PAD = "pad"
    MAX = "max"
    CROP = "crop"
    STRETCH = "stretch"

    @classmethod
    def from_query(cls, value):
        """Devuelve el modo si el valor coincide exactamente, si no None."""
        for mode in cls:
            if mode.value == value:
                return mode
        return None
