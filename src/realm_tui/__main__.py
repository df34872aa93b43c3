# =============================================================================
# Module Entry Point
# =============================================================================
# Allows running the demo with: python -m realm_tui
# =============================================================================

import sys

from realm_tui.app import main

if __name__ == "__main__":
    sys.exit(main())
