from . import mesh, animation, render

__all__ = ["mesh", "animation", "render"]
