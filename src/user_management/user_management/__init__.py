"""User Management package.

This package is organized by feature modules (users, search, analytics,
export, operations, bulk) with a thin Flask controller layer on top of
service/repository layers.
"""
