"""Stateless numeric helpers shared by filters and executors."""
