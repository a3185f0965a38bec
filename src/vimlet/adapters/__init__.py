"""Host adapters for the engine."""
