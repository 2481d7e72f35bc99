"""Slack Integration Package.

This package contains the Slack integration modules. Contains:

- client: WebClient factories with the transport retry policy.
- users: users.info, users.lookupByEmail and users.list calls.
"""
