"""Command line client for the image resize API."""
