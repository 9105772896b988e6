"""
HTTP surface for the Flight Progress Engine.
"""
