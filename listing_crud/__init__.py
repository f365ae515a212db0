"""Listing CRUD demo - MongoDB operations and a tiny HTTP server."""
