"""Command-line style front end: parsing, dispatch, rendering, HTTP routes."""
