"""Infrastructure modules for the allowlist resolver.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger)
- operations: Operation results and Slack error classification
"""
