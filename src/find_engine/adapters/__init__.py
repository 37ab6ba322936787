"""Host adapters for the search engine."""
