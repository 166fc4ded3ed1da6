#!/usr/bin/env python3
"""
Main entry point for the Video Catalog System.

This script starts the API server with the in-memory client directory and
video store.
"""

import sys
import os

# Add the current directory to Python path to import our modules
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from video_catalog_system.main import main

if __name__ == "__main__":
    main()
