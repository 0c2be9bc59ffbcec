"""Bookstore catalog backend: books, categories and their HTTP API."""
