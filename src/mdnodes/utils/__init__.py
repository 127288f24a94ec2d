"""Utility helpers shared by the parser and the command line interface."""
