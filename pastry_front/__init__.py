"""Ordering front-end for the bakery: sign-up, approvals, catalog and orders."""
