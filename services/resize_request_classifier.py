import re
from typing import Mapping, Optional

from domain.enums.resize_mode import ResizeMode
from domain.schemas.resize_schema import ResizeParams, RESIZE_PARAM_NAMES, DEFAULT_QUALITY

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg")

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


class ResizeRequestClassifier:

    @staticmethod
    def is_image_path(path: Optional[str]) -> bool:
        if not path:
            return False
        return path.lower().endswith(IMAGE_SUFFIXES)

    @staticmethod
    def classify(path: Optional[str], query: Mapping[str, str]) -> ResizeParams:
        """Decide si la petición pide una transformación y extrae sus parámetros.

        Una ruta que no es imagen o una query vacía devuelven parámetros con
        has_params=False, sin parsear nada más.
        """
        if not query or not ResizeRequestClassifier.is_image_path(path):
            return ResizeParams()
        return ResizeRequestClassifier.get_resize_params(path, query)

    @staticmethod
    def get_resize_params(path: str, query: Mapping[str, str]) -> ResizeParams:
        has_params = any(name in query for name in RESIZE_PARAM_NAMES)
        if not has_params:
            return ResizeParams()

        values = {name: ResizeRequestClassifier._get_value(query, name) for name in RESIZE_PARAM_NAMES}

        if "format" in query:
            image_format = values["format"]
        else:
            image_format = path[path.rfind(".") + 1:]

        w = ResizeRequestClassifier._parse_size(values["w"])
        h = ResizeRequestClassifier._parse_size(values["h"])

        quality = ResizeRequestClassifier._parse_int(values["quality"])
        if quality is None:
            quality = DEFAULT_QUALITY

        # Solo se respeta el modo pedido cuando vienen los dos ejes
        mode = ResizeMode.MAX
        if w != 0 and h != 0 and "mode" in query:
            mode = ResizeMode.from_query(values["mode"]) or ResizeMode.MAX

        return ResizeParams(
            has_params=True,
            w=w,
            h=h,
            autorotate=ResizeRequestClassifier._parse_bool(values["autorotate"]),
            quality=quality,
            format=image_format,
            mode=mode
        )

    @staticmethod
    def _get_value(query: Mapping[str, str], name: str) -> Optional[str]:
        """Valor crudo del parámetro.

        Si la clave se repite (`?w=10&w=20`) los valores se unen con comas,
        así que un número repetido no parsea y cae a su valor por defecto.
        """
        if hasattr(query, "getlist"):
            values = query.getlist(name)
            return ",".join(values) if values else None
        return query.get(name)

    @staticmethod
    def _parse_int(value: Optional[str]) -> Optional[int]:
        if value is None or not _INT_PATTERN.match(value):
            return None
        return int(value)

    @staticmethod
    def _parse_size(value: Optional[str]) -> int:
        size = ResizeRequestClassifier._parse_int(value)
        if size is None or size < 0:
            return 0
        return size

    @staticmethod
    def _parse_bool(value: Optional[str]) -> bool:
        if value is None:
            return False
        return value.strip().lower() == "true"
