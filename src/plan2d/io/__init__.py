"""JSON input/output for floor plans."""
