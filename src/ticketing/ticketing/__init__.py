"""Ticketing user lifecycle package.

Organized by feature modules (users, projects, tasks, identity) with
Protocol-based repositories and constructor-injected services.
"""
