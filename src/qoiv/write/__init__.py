from .debug_image import write_image_tiff

__all__ = ["write_image_tiff"]
