"""
User Moderation Module

Separation of concerns:
- auth: Principal resolution and role gating
- domain: Domain models and enumerations
- services: Business logic (search, mutators, listings)
- repositories: Data access
- api: REST API endpoints
"""
