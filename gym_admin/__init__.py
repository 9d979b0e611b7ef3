# =======================================================================================
# gym_admin/__init__.py - Package Initialization
# =======================================================================================
"""
Gym Admin Live Client

Administrative client for a gym facility backend: member subscriptions,
payments and manual access registration, plus a live operational dashboard
fed by the backend's STOMP access-log stream.
"""

__version__ = "1.0.0"
__author__ = "Gym Admin Team"
