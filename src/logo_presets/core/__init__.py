"""
Core modules for logo_presets.

This package contains:
- The built-in preset catalog
- Loading and lookup of built-in and user presets
- Merging presets into compile and generation options
- Configuration management
"""
