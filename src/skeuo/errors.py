"""Exception types raised when building shapes, materials and settings."""


class SkeuoError(ValueError):
    """Base class for all validation errors raised by skeuo."""


class GeometryError(SkeuoError):
    """Invalid shape parameters (radius, border radius, depth, corners)."""


class MaterialError(SkeuoError):
    """Invalid material parameters or unknown material preset."""


class SettingError(SkeuoError):
    """Invalid lighting setting (zero incident vector, ambient, distance)."""


class ImageBufferError(SkeuoError):
    """Target image is not an (H, W, 4) uint8 array."""


class SceneError(SkeuoError):
    """Malformed declarative scene description."""
