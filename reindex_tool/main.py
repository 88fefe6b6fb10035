"""
Reindex Tool - Main Entry

Supports:
- CLI mode (default, works on the current directory)
- GUI mode (--gui or -g parameter)

Usage:
    reindex                  # Renumber files in the current directory
    reindex --dry-run        # Preview only
    reindex -m 3             # At least three index digits
    reindex --gui            # GUI mode
    python -m reindex_tool   # Same as reindex
"""

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    # Check if GUI should be started
    if "--gui" in argv or "-g" in argv:
        try:
            from .gui import main as gui_main
        except ImportError as e:
            print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
            print(f"Detailed error: {e}")
            print("\nInstall command: pip install PySide6")
            print("\nTo use CLI mode, run without --gui")
            return 1
        return gui_main()

    from .cli import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
