"""Endpoint groups mounted by :func:`linkpreview.api.app.create_app`."""
