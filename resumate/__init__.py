"""
resumate - Resume rendering and templating core

Maps a structured resume document onto one of a fixed set of named visual
templates, themed by a single accent color.

Architecture:
- Templating Context: Resume document model, shared formatting rules, template variants
- Rendering Context: HTML serialization and export of rendered trees
"""

__version__ = "0.1.0"
