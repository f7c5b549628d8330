from .galleries import GalleryRepository  # noqa: F401
