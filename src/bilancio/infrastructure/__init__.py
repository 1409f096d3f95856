"""Infrastructure adapters: backend API client and session storage."""
