# =============================================================================
# Rendering Module
# =============================================================================
# The rendering backend components draw through.
#
# Drawing is done with Rich: components build Rich renderables and paint
# them into a Frame at a given Rect. The Frame is then displayed by the host
# (the Textual app) or printed with a Rich Console.
# =============================================================================

from realm_tui.rendering.frame import Frame, Rect, RenderError

__all__ = ["Frame", "Rect", "RenderError"]
