"""Local preview server for the rendered site."""
