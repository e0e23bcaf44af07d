#!/usr/bin/env python3
"""
Launch the medical records window from a source checkout.

Installed copies use the `medrecords-gui` console script instead.
"""
import os
import sys

# Run from anywhere without installing the package
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from gui.app import main

if __name__ == "__main__":
    main()
