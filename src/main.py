#!/usr/bin/env python3
"""
Aether chain inspector
Entry point: ``python -m src.main [run|snapshot|address ADDRESS]``
"""
from .cli import main

if __name__ == "__main__":
    main()
