from .camera import PerspectiveCamera, perspective_matrix
from .camera_rig import CameraRig, smooth_axis

__all__ = [
    "PerspectiveCamera",
    "perspective_matrix",
    "CameraRig",
    "smooth_axis",
]
