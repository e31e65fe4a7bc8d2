#!/usr/bin/env python3
import sys
import os

# Lets `python entry.py` run from a checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from wpmainfile.main import main

if __name__ == "__main__":
    sys.exit(main())
