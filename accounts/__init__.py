"""
Accounts module - Account records and the license clock.

This module handles:
- Account entity and license clock
- First-login activation
- Administrative provisioning, listing, deletion and extension
"""
