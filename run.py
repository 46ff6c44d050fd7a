"""
Entry Point Script (Bootstrap)
==============================
This script is a convenient starting point for development runs.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so 'from curvedtext...' resolves without
   installing the package first.

Usage:
    $ python run.py path --radius 80 --start 210 --end 150 --side left
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from curvedtext.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
