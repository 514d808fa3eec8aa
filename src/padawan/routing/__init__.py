"""Routing: path templates, route records, and first-match lookup.

Routes are registered during setup and sealed when the app serves its
first request. Lookup is a linear scan in registration order.
"""
