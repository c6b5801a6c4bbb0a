"""Infrastructure adapters.

Adapters implement protocols defined in core/protocols/.
Each adapter wraps one concern (tracker variant, HTTP transport, PostHog, consent).
"""
