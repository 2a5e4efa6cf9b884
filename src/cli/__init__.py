"""Command line tooling for inspecting fixture files."""
