"""Invoice financing API: authorization gate, notification dispatch and domain operations."""
