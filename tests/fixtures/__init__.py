"""Reusable test fixtures for gtestwizard."""
