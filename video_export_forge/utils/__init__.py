"""Shared helpers: argument rendering, output paths, job files, logging."""
