# GUI subpackage marker.
__all__ = ["preview_window"]
