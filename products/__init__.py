"""
products — paginated product catalogue listing.
"""
