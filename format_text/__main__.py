"""Package entry point for ``python -m format_text``.

Delegates to the CLI's main() function.
"""

from format_text.cli import main

if __name__ == "__main__":
    main()
