"""
Entry point for running the Video Catalog System as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
