"""Deployment pipeline integrations."""
