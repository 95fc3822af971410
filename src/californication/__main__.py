"""
Run with: python -m californication
"""
from californication.main import main

if __name__ == "__main__":
    main()
