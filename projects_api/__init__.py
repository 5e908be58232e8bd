"""Projects API: validated CRUD procedures over a pluggable record store."""
