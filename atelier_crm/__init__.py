"""Atelier CRM service package.

Client records, the sales pipeline, tasks and the dashboard activity feed for
interior-design and furniture sales teams.
"""
