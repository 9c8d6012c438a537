try:
    from cli.app import cli
except ModuleNotFoundError:
    # Fallback: ensure project root is on sys.path when run as a script
    import os
    import sys

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from cli.app import cli


def main():
    """Entry point for the stack-metrics CLI. Delegates to cli.app:cli."""
    cli(obj={})


if __name__ == "__main__":
    main()
