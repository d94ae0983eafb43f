# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

__version__ = "0.1.0"
