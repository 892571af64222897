"""
Marketplace Back Office

Moderation and view-consistency core for the marketplace admin surface.
"""
