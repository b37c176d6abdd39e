"""In-memory kanban board store and its request handlers."""
