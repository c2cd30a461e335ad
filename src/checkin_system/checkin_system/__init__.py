"""Geofenced check-in service package.

This package is organized by feature modules (geofence, checkins, reports)
with a thin Flask controller layer over store/service/repository layers.
"""
