"""Cross-cutting concerns: exceptions, logging and HTTP error handling."""
