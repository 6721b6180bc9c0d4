"""
RoleScout: role suggestion and ranking engine for a casting marketplace.
"""

__app_name__ = "RoleScout"
__version__ = "0.1.0"
