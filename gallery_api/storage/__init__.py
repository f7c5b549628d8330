from .filesystem import ImageStorage  # noqa: F401
