"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout.

It is located outside the 'src' package and puts 'src' on sys.path so that
'from californication...' resolves without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from californication.main import main

if __name__ == "__main__":
    main()
