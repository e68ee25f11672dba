"""Utility helpers for sdd-system core.

- io/: UTF-8 text and YAML reads
- paths/: Project and plugin root resolution
- text/: Frontmatter parsing
"""
