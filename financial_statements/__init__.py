"""Financial statements from a flat list of accounting entries."""
