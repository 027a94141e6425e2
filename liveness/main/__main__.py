"""
Main module entry point.

Allows starting the server with: python -m liveness.main
"""

from .server import main

if __name__ == "__main__":
    main()
