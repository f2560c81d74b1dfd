"""Bouncer demo application."""
