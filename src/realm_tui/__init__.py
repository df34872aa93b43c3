# =============================================================================
# Realm-TUI: Component-Based Terminal UIs, Model-View-Update Style
# =============================================================================
#
# Realm-TUI lets you build terminal applications out of reusable components:
#
#   - Components render themselves and turn input events into messages
#   - A View owns the components by id and routes input to the focused one
#   - Your reducer (update) reacts to messages, possibly producing more
#   - Props, built with fluent builders, carry each component's settings
#
# Rendering goes through Rich; the default host runs on Textual.
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "realm-tui"

# Main entry point - this is what gets called by the 'realm-tui' command
from realm_tui.app import main

__all__ = ["main", "__version__", "__app_name__"]
