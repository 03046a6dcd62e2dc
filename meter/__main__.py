"""
Meter Module Entry Point
=========================

Allows running the Meter CLI via: python -m meter
"""

from meter.cli import main

if __name__ == "__main__":
    main()
