from .normalize import coerce_numeric, datum_field, datum_number

__all__ = [
    "coerce_numeric",
    "datum_field",
    "datum_number",
]
