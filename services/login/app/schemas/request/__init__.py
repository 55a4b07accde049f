from .FieldUpdateSchema import FieldUpdateSchema

__all__ = [
    "FieldUpdateSchema",
]
