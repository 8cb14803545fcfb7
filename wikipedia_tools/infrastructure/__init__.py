"""Infrastructure layer - Adapters for HTTP, configuration and tool registration."""
