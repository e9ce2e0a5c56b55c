"""
Device sessions module - Bearer tokens and single-device exclusivity.

This module handles:
- Token issuance and verification
- The one-session-per-account registry
- Login, refresh and check flows
"""
