"""Persistence — state file and cached problem files."""
