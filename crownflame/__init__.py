"""Scene data, validation, templates, scene files, transitions, settings and tile maps for 2D games."""

__version__ = "0.1.0"