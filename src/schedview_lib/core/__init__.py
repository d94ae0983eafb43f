# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for schedview.

This module collects the foundational classes, utilities, and helpers used
across the schedview codebase: configuration, error types, structured logging,
shared command-line options, and text formatting helpers.
"""
