"""In-memory bakery API used for local development and tests."""
