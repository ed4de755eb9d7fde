#!/usr/bin/env python3
"""
Log Viewer - Main Entry Point
Run the log viewer terminal UI, optionally opening a log file right away
"""
import locale
import sys
import traceback

from dotenv import load_dotenv

from LogViewer.UI import run_app


def main() -> None:
    # LOGVIEWER_HOME may come from a .env file
    load_dotenv()
    try:
        # Column sorting collates with the user's locale
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        print(f"Could not apply the system locale ({e}); sorting without it")
    initial_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        run_app(initial_path)
    except KeyboardInterrupt:
        print("\nLog Viewer terminated by user")
    except Exception as e:
        print(f"\nError running Log Viewer: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
