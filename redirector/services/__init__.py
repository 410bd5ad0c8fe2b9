"""
Services module for redirect resolution.

This module contains the redirect store capability and the service that
turns a request into a redirect or an error status, kept separate from the
API endpoints and database models.
"""
