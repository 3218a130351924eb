"""Fetch users from a REST API, print them and dump them as JSON."""
